from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from bookings.models import Booking
from reviews.models import Review
from testimonials.models import Testimonial, pick_avatar_color
from tours.models import Tour
from tours.pricing import quote_booking


ADMIN_EMAIL = "admin@sphinx-reisen.test"
ADMIN_PASSWORD = "SphinxAdmin123!"

SAMPLE_TOURS = [
    {
        "slug": "pyramids-of-giza-day-trip",
        "title": "Pyramids of Giza Day Trip",
        "title_de": "Tagesausflug zu den Pyramiden von Gizeh",
        "travel_type": Tour.ONE_DAY,
        "travel_type_de": "1 Tag",
        "category": "Cultural Tours",
        "category_de": "Kulturreisen",
        "description": "Visit the Great Pyramids, the Sphinx and the Valley Temple with an Egyptologist.",
        "description_de": "Besuchen Sie die Pyramiden, die Sphinx und den Taltempel mit einem Ägyptologen.",
        "highlights": ["Great Pyramid of Khufu", "Sphinx", "Camel ride"],
        "highlights_de": ["Cheops-Pyramide", "Sphinx", "Kamelritt"],
        "location1": "Giza Plateau",
        "location1_de": "Gizeh-Plateau",
        "location2": "Valley Temple",
        "location2_de": "Taltempel",
        "price": Decimal("150.00"),
        "price_eur": Decimal("135.00"),
        "primary_location": "Giza",
        "sort_order": 1,
    },
    {
        "slug": "white-desert-overnight-safari",
        "title": "White Desert Overnight Safari",
        "title_de": "Weiße Wüste Safari mit Übernachtung",
        "travel_type": Tour.TWO_DAYS,
        "travel_type_de": "2 Tage",
        "category": "Desert Safari",
        "category_de": "Wüstensafari",
        "description": "Camp under the stars among the chalk formations of the White Desert.",
        "description_de": "Zelten unter Sternen zwischen den Kalkfelsen der Weißen Wüste.",
        "highlights": ["Black Desert", "Crystal Mountain", "Bedouin dinner"],
        "highlights_de": ["Schwarze Wüste", "Kristallberg", "Beduinen-Abendessen"],
        "price": Decimal("320.00"),
        "on_sale": True,
        "discount": 15,
        "primary_location": "Cairo",
        "sort_order": 2,
    },
    {
        "slug": "luxor-to-aswan-nile-cruise",
        "title": "Luxor to Aswan Nile Cruise",
        "title_de": "Nilkreuzfahrt von Luxor nach Assuan",
        "travel_type": Tour.ONE_WEEK,
        "travel_type_de": "1 Woche",
        "category": "Nile Cruise",
        "category_de": "Nilkreuzfahrt",
        "description": "Sail the Nile between Luxor and Aswan with guided temple visits every day.",
        "description_de": "Segeln Sie auf dem Nil zwischen Luxor und Assuan mit täglichen Tempelbesuchen.",
        "highlights": ["Karnak Temple", "Valley of the Kings", "Philae"],
        "highlights_de": ["Karnak-Tempel", "Tal der Könige", "Philae"],
        "price": Decimal("1190.00"),
        "price_eur": Decimal("1090.00"),
        "primary_location": "Luxor",
        "sort_order": 3,
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "name": "Anna Schmidt",
        "country": "Germany",
        "role": "Family traveller",
        "role_de": "Familienreisende",
        "initials": "AS",
        "text": "Our guide made the pyramids come alive for the kids. Perfectly organised.",
        "text_de": "Unser Guide hat die Pyramiden für die Kinder lebendig gemacht. Perfekt organisiert.",
        "sort_order": 1,
    },
    {
        "name": "James Carter",
        "country": "United Kingdom",
        "role": "Solo traveller",
        "initials": "JC",
        "text": "The desert safari was the highlight of my trip. Great food and great company.",
        "sort_order": 2,
    },
]


class Command(BaseCommand):
    help = "Populate the local development database with sample tours, bookings and testimonials."

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError("Refusing to seed data while DEBUG is False.")

        with transaction.atomic():
            self.stdout.write(self.style.MIGRATE_HEADING("Ensuring admin user"))
            self._ensure_admin()

            self.stdout.write(self.style.MIGRATE_HEADING("Creating tours"))
            tours = [self._ensure_tour(data) for data in SAMPLE_TOURS]

            self.stdout.write(self.style.MIGRATE_HEADING("Creating testimonials"))
            for data in SAMPLE_TESTIMONIALS:
                self._ensure_testimonial(data)

            self.stdout.write(self.style.MIGRATE_HEADING("Replacing sample bookings and reviews"))
            Booking.objects.filter(email__endswith="@example.test").delete()
            Review.objects.filter(email__endswith="@example.test").delete()

            pyramids, safari = tours[0], tours[1]
            self._create_booking(
                tour=pyramids,
                name="Greta Guest",
                email="greta@example.test",
                locale="de",
                adults=2,
                children=1,
                days_ahead=14,
            )
            self._create_booking(
                tour=safari,
                name="Frank Friend",
                email="frank@example.test",
                locale="en",
                adults=1,
                days_ahead=30,
                status=Booking.CONFIRMED,
            )

            Review.objects.create(
                tour=pyramids,
                name="Greta Guest",
                email="greta@example.test",
                rating=5,
                review_text="Unforgettable morning at the pyramids, thank you!",
                is_approved=True,
            )
            Review.objects.create(
                tour=safari,
                name="Frank Friend",
                email="frank@example.test",
                rating=4,
                review_text="Cold night but an amazing sky. Would book again.",
                is_approved=False,
            )

        self.stdout.write(self.style.SUCCESS("Development seed data created."))
        self.stdout.write(self.style.NOTICE(f"Admin {ADMIN_EMAIL} password: {ADMIN_PASSWORD}"))

    def _ensure_admin(self) -> User:
        user = User.objects.filter(email__iexact=ADMIN_EMAIL).first()
        if user is None:
            return User.objects.create_admin(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, name="Office")
        if not user.is_staff or not user.is_active:
            user.is_staff = True
            user.is_active = True
            user.save(update_fields=["is_staff", "is_active"])
        if not user.has_usable_password():
            user.set_password(ADMIN_PASSWORD)
            user.save(update_fields=["password"])
        return user

    def _ensure_tour(self, data: dict) -> Tour:
        defaults = {key: value for key, value in data.items() if key != "slug"}
        tour, created = Tour.objects.update_or_create(slug=data["slug"], defaults=defaults)
        if created:
            self.stdout.write(self.style.NOTICE(f"Added tour {tour.title}"))
        return tour

    def _ensure_testimonial(self, data: dict) -> Testimonial:
        defaults = dict(data)
        defaults["image"] = pick_avatar_color(data["initials"])
        testimonial, _ = Testimonial.objects.update_or_create(name=data["name"], defaults=defaults)
        return testimonial

    def _create_booking(
        self,
        *,
        tour: Tour,
        name: str,
        email: str,
        locale: str,
        adults: int,
        children: int = 0,
        days_ahead: int = 7,
        status: str = Booking.PENDING,
    ) -> Booking:
        quote = quote_booking(tour, locale, adults, children)
        return Booking.objects.create(
            tour=tour,
            tour_title=tour.title,
            name=name,
            email=email,
            phone="+20 100 000 0000",
            adults=adults,
            children=children,
            travel_date=timezone.localdate() + timedelta(days=days_ahead),
            locale=locale,
            total_price=quote.total,
            currency=quote.unit.currency,
            currency_symbol=quote.unit.symbol,
            status=status,
        )
