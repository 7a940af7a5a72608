from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Teclado mecanico", "Switches rojos, layout ES", Decimal("189000.00")),
    ("Mouse inalambrico", "Sensor optico 1600 DPI", Decimal("79000.00")),
    ("Monitor 24", "Panel IPS Full HD", Decimal("649000.00")),
    ("Audifonos", "Con microfono y cancelacion", Decimal("159000.00")),
    ("Webcam HD", "1080p con enfoque automatico", Decimal("129000.00")),
    ("Memoria USB 64GB", "USB 3.1", Decimal("35000.00")),
    ("Disco SSD 1TB", "NVMe PCIe 4.0", Decimal("389000.00")),
    ("Base portatil", "Aluminio ajustable", Decimal("99000.00")),
    ("Hub USB-C", "7 puertos con HDMI", Decimal("145000.00")),
]


class Command(BaseCommand):
    help = "Seed database with a sample product catalogue."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")

        created = 0
        for name, description, price in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"description": description, "price": price},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products_created={created}, "
                f"products_total={Product.objects.count()}"
            )
        )
