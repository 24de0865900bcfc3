#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample data for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Wipe the catalog first
    python scripts/seed_data.py --clear

Every record goes through the service layer, so seeded data passes the
same validation as data created over the API.
"""

import argparse
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.database import SessionLocal, create_tables
from bookstore.models import Author, Book, Publisher, Tag, book_tags
from bookstore.schemas import AuthorCreate, BookCreate, PublisherCreate, TagCreate
from bookstore.services import authors as author_service
from bookstore.services import books as book_service
from bookstore.services import publishers as publisher_service
from bookstore.services import tags as tag_service


def clear_data(db: Session) -> None:
    """Remove every row from the catalog tables, children first."""
    print("Clearing existing data...")
    db.execute(delete(book_tags))
    db.execute(delete(Book))
    db.execute(delete(Tag))
    db.execute(delete(Publisher))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> None:
    print("Creating authors...")
    authors_data = [
        ("George Orwell", "orwell@example.com"),
        ("Jane Austen", "austen@example.com"),
        ("Ernest Hemingway", "hemingway@example.com"),
        ("Agatha Christie", "christie@example.com"),
        ("Isaac Asimov", "asimov@example.com"),
    ]
    for name, email in authors_data:
        author_service.create_author(db, AuthorCreate(name=name, email=email))
    print(f"Created {len(authors_data)} authors.")


def create_publishers(db: Session) -> None:
    print("Creating publishers...")
    publishers_data = [
        ("Secker & Warburg", "London, United Kingdom"),
        ("Penguin Classics", "London, United Kingdom"),
        ("Scribner", "New York, United States"),
        ("Gnome Press", "New York, United States"),
    ]
    for name, address in publishers_data:
        publisher_service.create_publisher(db, PublisherCreate(name=name, address=address))
    print(f"Created {len(publishers_data)} publishers.")


def create_tags(db: Session) -> None:
    print("Creating tags...")
    tag_names = ["classic", "dystopia", "romance", "mystery", "robots"]
    for name in tag_names:
        tag_service.create_tag(db, TagCreate(name=name))
    print(f"Created {len(tag_names)} tags.")


def create_books(db: Session) -> int:
    """Create sample books, referencing authors, publishers and tags by name."""
    print("Creating books...")
    books_data = [
        {
            "title": "1984",
            "isbn": "01-949-001",
            "price": Decimal("12.99"),
            "quantity": 5,
            "category": "fiction",
            "author_name": "George Orwell",
            "publisher_name": "Secker & Warburg",
            "tag_names": ["classic", "dystopia"],
        },
        {
            "title": "Animal Farm",
            "isbn": "01-945-002",
            "price": Decimal("9.99"),
            "quantity": 3,
            "category": "fiction",
            "author_name": "George Orwell",
            "publisher_name": "Secker & Warburg",
            "tag_names": ["classic"],
        },
        {
            "title": "Pride and Prejudice",
            "isbn": "02-813-001",
            "price": Decimal("8.99"),
            "quantity": 7,
            "category": "fiction",
            "author_name": "Jane Austen",
            "publisher_name": "Penguin Classics",
            "tag_names": ["classic", "romance"],
        },
        {
            "title": "The Old Man and the Sea",
            "isbn": "03-952-001",
            "price": Decimal("11.99"),
            "quantity": 2,
            "category": "novella",
            "author_name": "Ernest Hemingway",
            "publisher_name": "Scribner",
            "tag_names": ["classic"],
        },
        {
            "title": "Murder on the Orient Express",
            "isbn": "04-934-001",
            "price": Decimal("14.99"),
            "quantity": 4,
            "category": "mystery",
            "author_name": "Agatha Christie",
            "publisher_name": "Penguin Classics",
            "tag_names": ["mystery"],
        },
        {
            "title": "I, Robot",
            "isbn": "05-950-001",
            "price": Decimal("13.99"),
            "quantity": 6,
            "category": "science fiction",
            "author_name": "Isaac Asimov",
            "publisher_name": "Gnome Press",
            "tag_names": ["robots"],
        },
    ]

    for data in books_data:
        book_service.create_book(db, BookCreate(**data))

    print(f"Created {len(books_data)} books.")
    return len(books_data)


def seed_database(clear_existing: bool = False) -> None:
    """
    Seed the catalog.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        create_authors(db)
        create_publishers(db)
        create_tags(db)
        book_count = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"  - Books: {book_count}")
        print("API documentation at http://localhost:8080/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the bookstore catalog")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete all catalog data before seeding",
    )
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)
