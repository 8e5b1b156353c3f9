"""Demo catalog used when an administrator resets the catalog without a seed set."""

from decimal import Decimal

from educa.domain.catalog.entities.course import Course


def default_seed_courses() -> list[Course]:
    """Build a fresh copy of the demo catalog."""
    return [
        Course.create(
            title="Full Stack Web Development",
            description="Build and deploy production web applications from database to browser.",
            instructor="Stephen",
            price=Decimal("499"),
            level="Intermediate",
        ),
        Course.create(
            title="Cloud Engineering",
            description="Design, automate and operate infrastructure on public clouds.",
            instructor="Asha Rao",
            price=Decimal("550"),
            level="Advanced",
        ),
        Course.create(
            title="Python for Data Analysis",
            description="Clean, explore and visualise real datasets with the Python ecosystem.",
            instructor="Daniel Okafor",
            price=Decimal("450"),
            level="Beginner",
        ),
    ]
