"""Seed realistic sample data for the garment storefront.

Creates:
- Back-office staff (admin, shop manager, market manager) and a few shoppers
  with one or two saved addresses each
- Wholesalers + purchase invoices numbered per financial year
- Categories, header categories and products (some live, some drafts)
- Garment variants of every kind, linked to products and wholesalers
- Coupons, banners, testimonials and blog posts
- Showcase rails, the About Us page and the store policies

Existing rows are deleted first unless ``--keep`` is given; superusers are
always preserved.

Usage:
  python manage.py seed_data
  python manage.py seed_data --products 60 --invoices 20 --seed 7
"""

import random
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone
from faker import Faker
from rest_framework import serializers

from accounts.models import User, UserAddress
from cart.models import CartItem, WishlistItem
from invoices.models import Invoice, Wholesaler
from invoices.numbering import next_invoice_number
from marketing.models import AboutUs, Banner, Blog, Coupon, Policy, Testimonial
from orders.models import Order
from products.models import Category, HeaderCategory, Product, ShowcaseItem
from variants.kinds import KINDS
from variants.models import GarmentVariant

SEED_PASSWORD = 'Password123!'

CATEGORY_NAMES = ['Blouses', 'Kurtis', 'Kurti Sets', 'Petticoats', 'Lehengas', 'Sarees', 'Dupattas']

FABRICS = ['Cotton', 'Rayon', 'Silk', 'Georgette', 'Chiffon', 'Crepe', 'Net', 'Velvet', 'Linen']
WORKS = ['Block print', 'Embroidery', 'Zari', 'Mirror work', 'Sequins', 'Bandhani', 'Plain', 'Gota patti']
SIZES = ['XS', 'S', 'M', 'L', 'XL', 'XXL', '32', '34', '36', '38', '40', '42']
LENGTHS = ['36"', '38"', '40"', '42"', '44"', '46"', '48"']
SLEEVES = ['Sleeveless', 'Short', 'Elbow', 'Three quarter', 'Full']

# Values for attribute keys that a plain word would not describe well
ATTRIBUTE_VOCAB = {
    'fabricType': FABRICS,
    'kurtiFabricType': FABRICS,
    'petticoatFabricType': FABRICS,
    'blouseFabric': FABRICS,
    'skirtFabric': FABRICS,
    'dupattaFabric': FABRICS,
    'work': WORKS,
    'workAndPrint': WORKS,
    'pattern': ['Straight', 'A-line', 'Anarkali', 'Angrakha', 'Kaftan'],
    'bustSize': SIZES,
    'waistSize': SIZES,
    'pantWaistSize': SIZES,
    'pantHipSize': SIZES,
    'blouseLength': ['14"', '15"', '16"'],
    'kurtiLength': LENGTHS,
    'pantLength': LENGTHS,
    'petticoatLength': LENGTHS,
    'dupattaLength': ['2.25 m', '2.5 m'],
    'dupattaWidth': ['36"', '40"', '44"'],
    'sleeveLength': SLEEVES,
    'lehngaType': ['A-line', 'Flared', 'Mermaid', 'Panelled'],
    'blouseStitching': ['Stitched', 'Semi-stitched', 'Unstitched'],
    'skirtStitching': ['Stitched', 'Semi-stitched'],
}


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def _financial_year(day) -> str:
    """Indian financial year (April to March) containing ``day``, e.g. ``2024-25``."""
    start = day.year if day.month >= 4 else day.year - 1
    return f"{start}-{str(start + 1)[-2:]}"


class Command(BaseCommand):
    help = 'Reset and seed the database with sample storefront and purchasing data.'

    def add_arguments(self, parser):
        parser.add_argument('--products', type=int, default=40, help='Number of products to generate.')
        parser.add_argument('--wholesalers', type=int, default=6, help='Number of wholesalers to generate.')
        parser.add_argument('--invoices', type=int, default=15, help='Number of purchase invoices to generate.')
        parser.add_argument('--variants-per-product', type=int, default=3, help='Garment variants stocked per product.')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data.')
        parser.add_argument('--keep', action='store_true', help='Keep existing rows instead of deleting them first.')

    def handle(self, *args, **options):
        if options['products'] < 1 or options['wholesalers'] < 1:
            raise CommandError('--products and --wholesalers must be at least 1')

        fake = Faker('en_IN')
        if options['seed'] is not None:
            random.seed(options['seed'])
            Faker.seed(options['seed'])

        with transaction.atomic():
            if not options['keep']:
                self._reset_database()

            self._create_staff(fake)
            wholesalers = self._create_wholesalers(fake, options['wholesalers'])
            invoices = self._create_invoices(fake, wholesalers, options['invoices'])
            categories = self._create_categories(fake)
            self._create_header_categories(categories)
            products = self._create_products(fake, categories, options['products'])
            variants = self._create_variants(fake, products, wholesalers, invoices, options['variants_per_product'])
            self._create_coupons()
            self._create_content(fake, products)
            self._create_showcase(fake, products)
            self._create_pages(fake)

        self.stdout.write(self.style.SUCCESS(
            f'Seeded {len(wholesalers)} wholesalers, {len(invoices)} invoices, '
            f'{len(products)} products and {variants} variants.'
        ))
        self.stdout.write(f'Staff and shopper accounts use the password {SEED_PASSWORD!r}.')

    def _reset_database(self):
        self.stdout.write(self.style.WARNING('Resetting existing data (preserving superusers only)...'))

        # Children before parents; most links are SET_NULL so order mostly matters for clarity
        for model in (
            CartItem, WishlistItem, Order, GarmentVariant, Invoice, Wholesaler,
            Product, ShowcaseItem, HeaderCategory, Category, Coupon, Banner, Testimonial, Blog,
            AboutUs, Policy,
        ):
            deleted, _ = model.objects.all().delete()
            self.stdout.write(f'Deleted {deleted} rows from {model._meta.label}')

        User.objects.filter(is_superuser=False).delete()
        self.stdout.write(self.style.SUCCESS('Database reset complete.'))

    def _create_staff(self, fake):
        self.stdout.write('Creating staff and shoppers...')
        accounts = [
            ('admin@example.com', User.ROLE_ADMIN),
            ('shop@example.com', User.ROLE_SHOP_MANAGER),
            ('marketing@example.com', User.ROLE_MARKET_MANAGER),
        ] + [(f'customer{i}@example.com', User.ROLE_USER) for i in range(1, 4)]

        for email, role in accounts:
            if User.objects.filter(email=email).exists():
                continue
            user = User.objects.create_user(
                email=email,
                password=SEED_PASSWORD,
                first_name=fake.first_name(),
                last_name=fake.last_name(),
                role=role,
                email_verified=True,
            )
            if role == User.ROLE_USER:
                self._create_addresses(fake, user)

    def _create_addresses(self, fake, user):
        for index in range(random.randint(1, 2)):
            UserAddress.objects.create(
                user=user,
                address=fake.street_address(),
                city=fake.city(),
                state=fake.state(),
                zipcode=fake.postcode(),
                mobile_number=fake.numerify('9#########'),
                is_default=index == 0,
            )

    def _create_wholesalers(self, fake, count):
        self.stdout.write(f'Creating {count} wholesalers...')
        wholesalers = []
        for _ in range(count):
            name = f'{fake.last_name()} Textiles'
            wholesalers.append(Wholesaler.objects.create(
                name=name,
                gst_number=f'{random.randint(10, 37)}{fake.bothify("?????####?1Z?").upper()}',
                area=fake.street_name(),
                city=fake.city(),
                state=fake.state(),
                contact_numbers=[fake.numerify('9#########') for _ in range(random.randint(1, 2))],
                email=fake.company_email(),
                website=f'https://{fake.domain_name()}',
                address=fake.street_address(),
                pincode=fake.numerify('4#####'),
                products_purchased=random.sample(CATEGORY_NAMES, k=3),
            ))
        return wholesalers

    def _create_invoices(self, fake, wholesalers, count):
        self.stdout.write(f'Creating {count} invoices...')
        today = timezone.localdate()
        invoices = []
        for _ in range(count):
            purchase_date = today - timedelta(days=random.randint(0, 540))
            financial_year = _financial_year(purchase_date)
            invoices.append(Invoice.objects.create(
                invoice_number=next_invoice_number(financial_year),
                wholesaler=random.choice(wholesalers),
                purchase_date=purchase_date,
                gross_amount=_money(random.uniform(5000, 150000)),
                gst_percentage=random.choice([Decimal('5'), Decimal('12'), Decimal('18')]),
                other_cost=_money(random.choice([0, 250, 500, 1200])),
                discount=_money(random.choice([0, 0, 500, 1000])),
                description=fake.sentence(nb_words=8),
                financial_year=financial_year,
            ))
        return invoices

    def _create_categories(self, fake):
        self.stdout.write('Creating categories...')
        return [
            Category.objects.create(
                name=name,
                description=fake.sentence(nb_words=10),
                color=fake.hex_color(),
                order=index,
            )
            for index, name in enumerate(CATEGORY_NAMES)
        ]

    def _create_header_categories(self, categories):
        self.stdout.write('Creating header categories...')
        for order, (name, picks) in enumerate([('Festive', categories[:3]), ('Bridal', categories[3:])]):
            HeaderCategory.objects.create(
                name=name,
                title=f'{name} collection',
                order=order,
                images=[
                    {'url': f'https://picsum.photos/seed/{c.slug}/600/800', 'categoryName': c.name}
                    for c in picks
                ],
            )

    def _create_products(self, fake, categories, count):
        self.stdout.write(f'Creating {count} products...')
        products = []
        for _ in range(count):
            category = random.choice(categories)
            name = f'{random.choice(FABRICS)} {random.choice(WORKS)} {category.name.rstrip("s")}'
            purchased = _money(random.uniform(200, 4000))
            transport = _money(random.choice([20, 40, 60]))
            price = _money(purchased * Decimal(random.choice(['1.6', '1.8', '2.0'])))
            gst = random.choice([5, 12])
            product = Product.objects.create(
                name=name,
                description=fake.paragraph(nb_sentences=3),
                category=category,
                price=price,
                old_price=_money(price * Decimal('1.25')),
                discount='20%',
                purchased_price=purchased,
                transport_cost=transport,
                other_cost=Decimal('0.00'),
                gst=f'{gst}%',
                total_price=_money(price + price * gst / 100),
                rating=Decimal(random.choice(['3.5', '4.0', '4.2', '4.5', '4.8'])),
                images=[f'https://picsum.photos/seed/{fake.uuid4()[:8]}/800/1000' for _ in range(3)],
                variations=[
                    {'size': size, 'color': fake.safe_color_name(), 'stock': random.randint(0, 25), 'price_modifier': 0}
                    for size in random.sample(SIZES[:6], k=3)
                ],
                status=random.choice([Product.STATUS_LIVE] * 4 + [Product.STATUS_DRAFT]),
                bestseller=random.random() < 0.2,
                trending=random.random() < 0.2,
                newarrival=random.random() < 0.3,
            )
            products.append(product)

        for product in products:
            others = [p for p in products if p.category_id == product.category_id and p.pk != product.pk]
            product.related_products.set(random.sample(others, k=min(3, len(others))))
        return products

    def _attributes_for(self, fake, kind):
        values = {}
        for key, field in kind.attributes().fields.items():
            if isinstance(field, serializers.BooleanField):
                values[key] = fake.pybool()
            elif key in ATTRIBUTE_VOCAB:
                values[key] = random.choice(ATTRIBUTE_VOCAB[key])
            elif key.endswith('Manufacturer') or key == 'manufacturer':
                values[key] = f'{fake.last_name()} Garments'
            elif key == 'designCode':
                values[key] = fake.bothify('LH-####').upper()
            else:
                values[key] = fake.word().title()
        return values

    def _create_variants(self, fake, products, wholesalers, invoices, per_product):
        self.stdout.write('Creating garment variants of every kind...')
        kinds = list(KINDS.values())
        financial_years = sorted({invoice.financial_year for invoice in invoices}) or [_financial_year(timezone.localdate())]

        created = 0
        for index, product in enumerate(products):
            for offset in range(per_product):
                # Cycle through the kinds so every kind is represented
                kind = kinds[(index * per_product + offset) % len(kinds)]
                GarmentVariant.objects.create(
                    kind=kind.key,
                    parent_product=product,
                    wholesaler=random.choice(wholesalers),
                    financial_year=random.choice(financial_years),
                    quantity=random.randint(0, 40),
                    attributes=self._attributes_for(fake, kind),
                )
                created += 1
        return created

    def _create_coupons(self):
        self.stdout.write('Creating coupons...')
        now = timezone.now()
        Coupon.objects.create(
            code='WELCOME10',
            description='10% off your first order',
            discount_type=Coupon.TYPE_PERCENTAGE,
            discount_value=Decimal('10'),
            max_discount=Decimal('500'),
        )
        Coupon.objects.create(
            code='FLAT200',
            description='Flat 200 off above 1499',
            discount_type=Coupon.TYPE_FLAT,
            discount_value=Decimal('200'),
            min_purchase=Decimal('1499'),
            expires_at=now + timedelta(days=60),
        )
        Coupon.objects.create(
            code='DIWALI25',
            description='Festive sale (expired)',
            discount_type=Coupon.TYPE_PERCENTAGE,
            discount_value=Decimal('25'),
            max_discount=Decimal('1000'),
            expires_at=now - timedelta(days=5),
        )

    def _create_content(self, fake, products):
        self.stdout.write('Creating banners, testimonials and blog posts...')
        for _ in range(3):
            Banner.objects.create(
                image=f'https://picsum.photos/seed/{fake.uuid4()[:8]}/1600/600',
                link=f'/category/{random.choice(CATEGORY_NAMES).lower().replace(" ", "-")}',
            )

        live = [p for p in products if p.status == Product.STATUS_LIVE] or products
        for _ in range(6):
            Testimonial.objects.create(
                name=fake.name(),
                image=f'https://i.pravatar.cc/150?u={fake.uuid4()[:8]}',
                rating=Decimal(random.choice(['4.0', '4.5', '5.0'])),
                review=fake.paragraph(nb_sentences=2),
                sku=random.choice(live).slug,
            )

        for _ in range(4):
            Blog.objects.create(
                title=fake.sentence(nb_words=6).rstrip('.'),
                description=fake.sentence(nb_words=14),
                image=f'https://picsum.photos/seed/{fake.uuid4()[:8]}/1200/800',
                content='\n\n'.join(fake.paragraphs(nb=4)),
            )

    def _create_showcase(self, fake, products):
        self.stdout.write('Filling the bestseller, trending, new arrival and shop-by-category rails...')
        live = [p for p in products if p.status == Product.STATUS_LIVE] or products
        for collection, _label in ShowcaseItem.COLLECTION_CHOICES:
            for product in random.sample(live, k=min(4, len(live))):
                mrp = product.old_price or product.price
                ShowcaseItem.objects.create(
                    collection=collection,
                    title=product.name,
                    description=product.description or fake.sentence(nb_words=12),
                    category=product.category.name if product.category_id else '',
                    images=product.images,
                    price=product.price,
                    mrp=mrp,
                    discount=product.discount or '0%',
                    ratings=product.rating or Decimal('0'),
                    variations=[
                        {'color': v['color'], 'size': v['size'], 'stock': v['stock'], 'sku': f'{product.slug}-{v["size"]}'.lower()}
                        for v in product.variations
                    ],
                )

    def _create_pages(self, fake):
        self.stdout.write('Writing the about us page and store policies...')
        AboutUs.objects.create(
            title='Our Story',
            description='\n\n'.join(fake.paragraphs(nb=3)),
            videos=[{
                'url': f'https://example.com/videos/{fake.uuid4()[:8]}.mp4',
                'poster': f'https://picsum.photos/seed/{fake.uuid4()[:8]}/1280/720',
            }],
        )
        for kind, label in Policy.KIND_CHOICES:
            Policy.objects.create(kind=kind, title=label, description='\n\n'.join(fake.paragraphs(nb=4)))
