# app/seed.py
from datetime import date
import logging

from sqlmodel import Session, select

from app.models.book import Book
from app.models.category import Category

logger = logging.getLogger(__name__)

SEED_COUNT = 110


class DatabaseSeeder:
    """Fills an empty development database with sample categories and books."""

    def __init__(self, session: Session, count: int = SEED_COUNT):
        self.session = session
        self.count = count

    def seed_data(self):
        if self.session.exec(select(Category)).first() is None:
            self.session.add_all(
                Category(name=f"Category {i}") for i in range(1, self.count + 1)
            )
            self.session.commit()
            logger.info(f"Seeded {self.count} categories")

        first_category = self.session.exec(select(Category).order_by(Category.id)).first()

        if self.session.exec(select(Book)).first() is None and first_category is not None:
            self.session.add_all(
                Book(
                    name=f"Book {i}",
                    author=f"Author {i}",
                    description=f"Test {i}",
                    publish_date=date.today(),
                    category_id=first_category.id,
                )
                for i in range(1, self.count + 1)
            )
            self.session.commit()
            logger.info(f"Seeded {self.count} books into category {first_category.id}")
