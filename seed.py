import logging
from datetime import date, datetime
from decimal import Decimal

from app.core.config import settings
from app.core.database import build_engine, build_session_factory, create_database_tables
from app.models.ceramic_class import CeramicClass
from app.models.month import Month
from app.models.student import Student, Timetable

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_data():
    """
    Function to seed initial data into the database.
    """
    engine = build_engine(settings)
    if settings.DB_CREATE_TABLES:
        create_database_tables(engine)
    db = build_session_factory(engine)()
    try:
        # 1. Skip when there is already data, to avoid duplicates
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")

        # 2. A few students, each with a month of classes
        ana = Student(name="Ana", birthday=date(1990, 4, 12), telephone="1155550101",
                      day="Lunes", timetable=Timetable.SIXTEEN)
        bruno = Student(name="Bruno", telephone="1155550102",
                        day="miércoles", timetable=Timetable.TEN)
        carla = Student(name="Carla", day="sábados por la mañana")

        ana.months = [Month(label="Marzo", classes=[
            CeramicClass(class_name="Torno", class_price=Decimal("12000"), class_paid=True,
                         class_day=datetime(2026, 3, 2, 16, 0), assistance=True),
            CeramicClass(class_name="Esmaltado", class_price=Decimal("12000"),
                         class_day=datetime(2026, 3, 9, 16, 0),
                         oven_name="Horneada bizcocho", oven_price=Decimal("3000")),
        ])]
        bruno.months = [Month(label="Marzo", classes=[
            CeramicClass(class_name="Modelado", class_price=Decimal("10000"),
                         material_name="Arcilla 5kg", material_price=Decimal("4500")),
        ])]

        # 3. Add to session and commit
        db.add_all([ana, bruno, carla])
        db.commit()

        logger.info("Data seeded successfully!")

    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    seed_data()
