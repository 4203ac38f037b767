"""Hand-authored marketing routes of the site.

Programmatic ``/solutions/{niche}-{city}`` pages are generated separately by
:mod:`sitegen.services.taxonomy`; the ``/solutions/`` prefix is reserved for
them and only the ``/solutions`` hub itself is listed here.
"""

from typing import Tuple

from sitegen.models.route import RouteManifestEntry

_HOME_TITLE = "Booking Software for UK Salons, Spas & Barbers | Elite Booker"
_HOME_DESCRIPTION = "Commission-free booking software for UK beauty and wellness businesses. Online scheduling, SMS reminders, deposits and client management. Plans from GBP 0."
_REFERRAL_TITLE = "Join the Referral Program | Elite Booker"
_REFERRAL_DESCRIPTION = "Join the Elite Booker referral program and earn rewards by introducing beauty and wellness businesses."


def static_route_definitions(base_url: str) -> Tuple[RouteManifestEntry, ...]:
    """Return the hand-authored manifest, with alias canonicals rooted at *base_url*."""
    return (
        RouteManifestEntry(
            path="/",
            title=_HOME_TITLE,
            description=_HOME_DESCRIPTION,
            canonical=f"{base_url}/",
            changefreq="daily",
            priority=1.0,
            intent="core",
        ),
        RouteManifestEntry(
            path="/business",
            title=_HOME_TITLE,
            description=_HOME_DESCRIPTION,
            canonical=f"{base_url}/",
            indexable=False,
            priority=0.2,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/pricing",
            title="Salon Software Pricing UK | No Hidden Booking Fees | Elite Booker",
            description="Simple pricing for UK salons. Free Basic plan forever. Professional GBP 9.99/month. Enterprise GBP 49.99/month. No commission and no contracts.",
            changefreq="weekly",
            priority=0.9,
            intent="core",
        ),
        RouteManifestEntry(
            path="/salon-booking-software-uk",
            title="Salon Booking Software UK | Online Appointments for Growing Teams",
            description="UK salon booking software for online appointments, reminders, deposits, and team scheduling.",
            priority=0.9,
            intent="money-page",
        ),
        RouteManifestEntry(
            path="/barbershop-booking-software-uk",
            title="Barbershop Booking Software UK | Fill Chairs and Reduce Gaps",
            description="UK barbershop booking software with online appointments, slot controls, reminders, and staff scheduling.",
            priority=0.9,
            intent="money-page",
        ),
        RouteManifestEntry(
            path="/nail-salon-booking-software-uk",
            title="Nail Salon Booking Software UK | Appointments & Deposits",
            description="UK nail salon booking software to manage appointments, add-ons, reminders, and deposit rules.",
            priority=0.9,
            intent="money-page",
        ),
        RouteManifestEntry(
            path="/beauty-salon-booking-system-uk",
            title="Beauty Salon Booking System UK | Scheduling & Team Control",
            description="Beauty salon booking system for UK businesses with online scheduling, reminders, and policy controls.",
            priority=0.9,
            intent="money-page",
        ),
        RouteManifestEntry(
            path="/hairdresser-booking-software-uk",
            title="Hairdresser Booking Software UK | Online Diary for Hair Teams",
            description="Hairdresser booking software in the UK for consultation-led services, reminders, and scheduling controls.",
            priority=0.9,
            intent="money-page",
        ),
        RouteManifestEntry(
            path="/signup",
            title="Create Your Business Account | Elite Booker",
            description="Start your Elite Booker account for your salon, barbershop, or wellness business. Set up in minutes and begin accepting bookings.",
            priority=0.9,
            intent="conversion",
        ),
        RouteManifestEntry(
            path="/signup/success",
            title="Signup Complete | Elite Booker",
            description="Your Elite Booker account has been created successfully.",
            indexable=False,
            priority=0.2,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/help",
            title="Help & Support | Elite Booker",
            description="Get help with bookings, account setup, billing, and troubleshooting for Elite Booker.",
            priority=0.6,
            intent="support",
        ),
        RouteManifestEntry(
            path="/search",
            title="Find Beauty & Wellness Businesses Near You | Elite Booker",
            description="Search and book trusted salons, spas, and wellness businesses across the UK.",
            changefreq="weekly",
            priority=0.6,
            intent="discovery",
        ),
        RouteManifestEntry(
            path="/features",
            title="Booking Software Features | Elite Booker",
            description="Explore Elite Booker features for salons and wellness businesses: SMS reminders, no-show protection, calendar sync, and online booking.",
            priority=0.8,
            intent="feature-hub",
        ),
        RouteManifestEntry(
            path="/features/sms-reminders",
            title="SMS Appointment Reminders - Reduce No-Shows by 70% | Elite Booker",
            description="Automated outbound SMS reminders for UK salons. 98% open rate, reduce no-shows by 70%. GBP 2.99/month unlimited. Try free today.",
            priority=0.8,
            intent="feature",
        ),
        RouteManifestEntry(
            path="/features/no-show-protection",
            title="No-Show Protection & Deposits | Elite Booker",
            description="Automated deposit collection for UK salons. Reduce no-shows by 85%. Set custom policies, instant Stripe payments, automatic refunds. Protect your revenue.",
            priority=0.8,
            intent="feature",
        ),
        RouteManifestEntry(
            path="/features/calendar-sync",
            title="Google Calendar Sync | Two-Way Appointment Sync | Elite Booker",
            description="Sync appointments with Google Calendar, Apple Calendar, Outlook. Two-way sync, real-time updates, mobile app integration. Never double-book again.",
            priority=0.8,
            intent="feature",
        ),
        RouteManifestEntry(
            path="/features/online-booking",
            title="24/7 Online Booking System | Elite Booker",
            description="Let UK clients book appointments 24/7. Mobile-optimized, real-time availability, instant confirmations. Increase bookings 30% with online scheduling.",
            priority=0.8,
            intent="feature",
        ),
        RouteManifestEntry(
            path="/compare",
            title="Elite Booker Comparisons | Fresha & Treatwell Alternatives",
            description="Compare Elite Booker against Fresha and Treatwell with clear UK pricing and feature breakdowns.",
            priority=0.8,
            intent="comparison-hub",
        ),
        RouteManifestEntry(
            path="/compare/vs-fresha",
            title="Elite Booker vs Fresha | UK Pricing & Fee Comparison",
            description="Source-linked UK comparison page covering subscription, commission, payment, and SMS pricing structure between Elite Booker and Fresha.",
            priority=0.9,
            intent="comparison",
        ),
        RouteManifestEntry(
            path="/compare/vs-treatwell",
            title="Elite Booker vs Treatwell | UK Pricing & Commission Comparison",
            description="Source-linked UK comparison page covering subscription tiers, commission model, and booking-cost structure between Elite Booker and Treatwell.",
            priority=0.9,
            intent="comparison",
        ),
        RouteManifestEntry(
            path="/solutions",
            title="Local Booking Software Solutions | Elite Booker",
            description="Explore local booking software pages for UK cities and beauty niches. Find tailored solutions for salons, barbers, lash techs, clinics, and more.",
            changefreq="weekly",
            priority=0.8,
            intent="solution-hub",
        ),
        RouteManifestEntry(
            path="/industries/lash-technicians",
            title="Lash Technician Booking Software UK - Elite Booker",
            description="Booking system built for lash techs. Online scheduling, deposit protection, client reminders & patch test tracking. Trusted by UK lash artists.",
            changefreq="weekly",
            priority=0.9,
            intent="industry",
        ),
        RouteManifestEntry(
            path="/industries/hair-salons",
            title="Salon Management Software UK - Elite Booker",
            description="Complete management system for UK hair salons. Online booking, client database, stock control, POS & reporting. Used by 1000+ salons nationwide.",
            changefreq="weekly",
            priority=0.9,
            intent="industry",
        ),
        RouteManifestEntry(
            path="/industries/barbers",
            title="Barber Shop Booking System UK - Reduce No-Shows",
            description="Modern booking software for UK barber shops. Online bookings, SMS reminders & staff scheduling. No commission fees.",
            changefreq="weekly",
            priority=0.9,
            intent="industry",
        ),
        RouteManifestEntry(
            path="/blog/reduce-salon-no-shows",
            title="How to Reduce Salon No-Shows by 40% - The UK Guide (2026)",
            description="Proven strategies to cut no-shows & late cancellations. SMS reminders, deposit policies, confirmation systems. Implement today, see results this week.",
            priority=0.7,
            intent="blog",
        ),
        RouteManifestEntry(
            path="/tools/roi-calculator",
            title="Salon Commission Calculator UK | Elite Booker",
            description="Free calculator to see how much you'll save by switching from Fresha or Treatwell. Compare booking software costs for UK salons, spas, and beauty businesses.",
            priority=0.8,
            intent="tool",
        ),
        RouteManifestEntry(
            path="/tools/deposit-policy-generator",
            title="Free Salon Deposit Policy Generator | HMRC-Compliant Template UK",
            description="Generate a free, HMRC-compliant deposit & cancellation policy for your UK salon, spa, or beauty business in 30 seconds. Copy-paste ready, legally sound.",
            priority=0.8,
            intent="tool",
        ),
        RouteManifestEntry(
            path="/referral-signup",
            title=_REFERRAL_TITLE,
            description=_REFERRAL_DESCRIPTION,
            priority=0.5,
            intent="referral",
        ),
        RouteManifestEntry(
            path="/join-referral-program",
            title=_REFERRAL_TITLE,
            description=_REFERRAL_DESCRIPTION,
            canonical=f"{base_url}/referral-signup",
            indexable=False,
            priority=0.2,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/referral-login",
            title="Referral Partner Login | Elite Booker",
            description="Sign in to access your Elite Booker referral dashboard.",
            indexable=False,
            priority=0.2,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/referral-dashboard",
            title="Referral Dashboard | Elite Booker",
            description="Track referral code activity and rewards in your Elite Booker dashboard.",
            indexable=False,
            priority=0.2,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/menu",
            title="Menu | Elite Booker",
            description="Mobile navigation menu for Elite Booker.",
            indexable=False,
            priority=0.1,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/404",
            title="Page not found | Elite Booker",
            description="The page you requested could not be found.",
            indexable=False,
            priority=0.1,
            intent="utility",
        ),
        RouteManifestEntry(
            path="/privacy",
            title="Privacy Policy | Elite Booker",
            description="Read Elite Booker privacy policy for data handling and GDPR commitments.",
            priority=0.4,
            intent="legal",
        ),
        RouteManifestEntry(
            path="/terms",
            title="Terms of Service | Elite Booker",
            description="Read Elite Booker terms for usage, billing, and account responsibilities.",
            priority=0.4,
            intent="legal",
        ),
        RouteManifestEntry(
            path="/security",
            title="Security & Data Protection | Elite Booker",
            description="Learn how Elite Booker protects client and business data across the platform.",
            priority=0.4,
            intent="legal",
        ),
    )
