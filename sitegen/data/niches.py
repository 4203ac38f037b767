"""Beauty and wellness niches with high booking-software demand."""

from typing import Tuple

from sitegen.models.niche import Niche

NICHES: Tuple[Niche, ...] = (
    Niche(
        id="lash-techs",
        slug="lash-techs",
        name="Lash Technicians",
        plural_name="Lash Techs",
        singular_name="Lash Technician",
        description="Eyelash extension specialists, volume lash artists, and lash lift technicians",
        pain_points=(
            "High no-show rates (30-40% without deposits)",
            "Time-consuming phone bookings during treatments",
            "Difficulty managing back-to-back appointments",
            "Lost revenue from last-minute cancellations",
        ),
        average_treatment_price=65,
        average_monthly_bookings=85,
        typical_services=("Classic Lashes", "Volume Lashes", "Lash Lift", "Lash Removal"),
    ),
    Niche(
        id="barbers",
        slug="barbers",
        name="Barbers",
        plural_name="Barbers",
        singular_name="Barber",
        description="Traditional barbershops, fade specialists, and modern barber studios",
        pain_points=(
            "Walk-in chaos disrupting scheduled appointments",
            "Saturday morning rush overwhelming phone lines",
            "Regulars expecting priority without appointments",
            "Cash-only perception hurting deposit collection",
        ),
        average_treatment_price=28,
        average_monthly_bookings=220,
        typical_services=("Haircut & Beard Trim", "Skin Fade", "Hot Towel Shave", "Beard Styling"),
    ),
    Niche(
        id="hair-salons",
        slug="hair-salons",
        name="Hair Salons",
        plural_name="Hair Salons",
        singular_name="Hair Salon",
        description="Full-service hair salons, color specialists, and styling studios",
        pain_points=(
            "Complex multi-service bookings (cut + color + treatment)",
            "Color consultations running over time",
            "Retail product tracking alongside appointments",
            "Staff schedule coordination for team bookings",
        ),
        average_treatment_price=75,
        average_monthly_bookings=180,
        typical_services=("Cut & Blow Dry", "Highlights", "Balayage", "Keratin Treatment"),
    ),
    Niche(
        id="aesthetics",
        slug="aesthetics",
        name="Aesthetics Clinics",
        plural_name="Aesthetics Clinics",
        singular_name="Aesthetics Clinic",
        description="Medical aesthetics, Botox practitioners, dermal filler specialists, and skin clinics",
        pain_points=(
            "High-value treatments requiring 50% deposits",
            "Strict medical consent forms and aftercare protocols",
            "Client confidentiality and GDPR compliance",
            "Insurance requirements for treatment documentation",
        ),
        average_treatment_price=280,
        average_monthly_bookings=65,
        typical_services=("Botox", "Dermal Fillers", "Skin Peels", "Laser Hair Removal"),
    ),
    Niche(
        id="nail-techs",
        slug="nail-techs",
        name="Nail Technicians",
        plural_name="Nail Techs",
        singular_name="Nail Technician",
        description="Gel nail specialists, acrylic artists, and mobile nail technicians",
        pain_points=(
            "Back-to-back bookings with no buffer time",
            "Gel removal no-shows wasting prep time",
            "Complex nail art requiring time estimates",
            "Product costs for unused appointments",
        ),
        average_treatment_price=42,
        average_monthly_bookings=140,
        typical_services=("Gel Manicure", "Acrylic Extensions", "Nail Art", "Pedicure"),
    ),
    Niche(
        id="massage-therapists",
        slug="massage-therapists",
        name="Massage Therapists",
        plural_name="Massage Therapists",
        singular_name="Massage Therapist",
        description="Sports massage, deep tissue, Swedish massage, and holistic therapists",
        pain_points=(
            "Same-day bookings filling schedule inefficiently",
            "Medical history forms lost or incomplete",
            "Difficulty blocking lunch breaks for recovery",
            "Regulars expecting their preferred time slot",
        ),
        average_treatment_price=58,
        average_monthly_bookings=95,
        typical_services=(
            "Deep Tissue Massage",
            "Sports Massage",
            "Swedish Massage",
            "Hot Stone Therapy",
        ),
    ),
    Niche(
        id="tattoo-artists",
        slug="tattoo-artists",
        name="Tattoo Artists",
        plural_name="Tattoo Artists",
        singular_name="Tattoo Artist",
        description="Custom tattoo artists, traditional tattoo studios, and body art specialists",
        pain_points=(
            "Custom design consultations before booking",
            "Multi-session tattoos requiring session deposits",
            "Aftercare instruction distribution",
            "Portfolio sharing for consultation bookings",
        ),
        average_treatment_price=180,
        average_monthly_bookings=45,
        typical_services=("Custom Tattoo", "Cover-Up Tattoo", "Tattoo Touch-Up", "Flash Tattoo"),
    ),
    Niche(
        id="dog-grooming",
        slug="dog-grooming",
        name="Dog Groomers",
        plural_name="Dog Groomers",
        singular_name="Dog Groomer",
        description="Pet grooming salons, mobile dog groomers, and breed specialists",
        pain_points=(
            "Aggressive dog no-shows wasting blocked time",
            "Breed-specific grooming time variations",
            "Flea/tick discoveries extending appointments",
            "Client education about grooming frequency",
        ),
        average_treatment_price=45,
        average_monthly_bookings=160,
        typical_services=("Full Groom", "Wash & Blow Dry", "Puppy First Groom", "Nail Clipping"),
    ),
)
