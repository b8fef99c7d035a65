#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample publishers, authors and books.

USAGE:
    python scripts/seed_data.py
    python scripts/seed_data.py --keep   # do not clear existing rows first
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Author, Book, BookAuthor, Publisher


def clear_data(db: Session) -> None:
    """Clear all existing data, join rows first."""
    print("Clearing existing data...")
    for model in (BookAuthor, Book, Author, Publisher):
        db.execute(delete(model))
    db.commit()
    print("Data cleared.")


def create_publishers(db: Session) -> dict[str, Publisher]:
    """Create sample publishers."""
    print("Creating publishers...")
    names = [
        "Penguin Books",
        "HarperCollins",
        "Vintage",
        "Tor Books",
        "Faber and Faber",
        "Bloomsbury",
    ]

    publishers = {name: Publisher(name=name) for name in names}
    db.add_all(publishers.values())
    db.commit()

    print(f"Created {len(publishers)} publishers.")
    return publishers


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors."""
    print("Creating authors...")
    names = [
        "George Orwell",
        "Terry Pratchett",
        "Neil Gaiman",
        "Ursula K. Le Guin",
        "Kazuo Ishiguro",
    ]

    authors = {name: Author(full_name=name) for name in names}
    db.add_all(authors.values())
    db.commit()

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(
    db: Session,
    publishers: dict[str, Publisher],
    authors: dict[str, Author],
) -> list[Book]:
    """Create sample books and link them to their authors."""
    print("Creating books...")
    books_data = [
        {
            "title": "1984",
            "description": "A dystopian novel about surveillance and totalitarian rule.",
            "genre": "Fiction",
            "publisher": "Penguin Books",
            "authors": ["George Orwell"],
        },
        {
            "title": "Animal Farm",
            "description": "An allegorical novella about a farm revolution gone wrong.",
            "genre": "Fiction",
            "publisher": "Penguin Books",
            "authors": ["George Orwell"],
        },
        {
            "title": "Good Omens",
            "description": "An angel and a demon try to prevent the apocalypse.",
            "genre": "Fantasy",
            "publisher": "HarperCollins",
            "authors": ["Terry Pratchett", "Neil Gaiman"],
        },
        {
            "title": "The Left Hand of Darkness",
            "description": "An envoy visits a planet whose people have no fixed sex.",
            "genre": "Science Fiction",
            "publisher": "Tor Books",
            "authors": ["Ursula K. Le Guin"],
        },
        {
            "title": "Never Let Me Go",
            "description": "Three friends grow up at an English boarding school.",
            "genre": "Fiction",
            "publisher": "Faber and Faber",
            "authors": ["Kazuo Ishiguro"],
        },
    ]

    books = []
    for data in books_data:
        author_names = data.pop("authors")
        publisher_name = data.pop("publisher")

        book = Book(**data, publisher=publishers[publisher_name])
        book.book_authors = [BookAuthor(author=authors[name]) for name in author_names]

        db.add(book)
        books.append(book)

    db.commit()

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

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

        publishers = create_publishers(db)
        authors = create_authors(db)
        books = create_books(db, publishers, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Publishers: {len(publishers)}")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")
    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the Library API database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()

    seed_database(clear_existing=not args.keep)
