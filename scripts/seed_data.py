#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample categories and breeds for development
and testing.

USAGE:
    # Make sure you're in the project root with venv activated
    python scripts/seed_data.py

    # Keep existing rows and only insert/update the sample ones
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Clears existing data (unless --keep is given)
3. Upserts sample categories by name
4. Validates each sample breed and upserts the valid ones by name
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from dog_api.database import SessionLocal, create_tables
from dog_api.errors import ValidationError
from dog_api.models import Breed, Category
from dog_api.schemas import BreedCreate, CategoryCreate
from dog_api.utils import validate_input

CATEGORIES = [
    {
        "name": "Herding",
        "description": "Dogs bred to gather, herd and protect livestock.",
    },
    {
        "name": "Sporting",
        "description": "Alert, active dogs bred to locate and retrieve game.",
    },
    {
        "name": "Toy",
        "description": "Small companion dogs with big personalities.",
    },
    {
        "name": "Working",
        "description": "Powerful dogs bred for guarding, pulling and rescue.",
    },
]

BREEDS = {
    "Herding": [
        {
            "name": "Border Collie",
            "common_names": ["Collie", "Scottish Sheepdog"],
            "description": "A highly intelligent, energetic herding dog known for its intense stare.",
            "history": "Developed on the border between Scotland and England to herd sheep.",
            "fun_fact": "Chaser the Border Collie learned the names of over 1,000 toys.",
            "health": "Generally healthy; watch for hip dysplasia and collie eye anomaly.",
            "origin": "Scotland and England",
            "colors": ["Black", "White", "Red", "Blue Merle"],
            "average_height": 53,
            "average_weight": 18,
            "average_life_expectancy": 13,
            "exercise_required": 5,
            "ease_of_training": 5,
            "affection": 4,
            "playfulness": 5,
            "good_with_children": 4,
            "good_with_dogs": 4,
            "grooming_required": 3,
        },
        {
            "name": "German Shepherd",
            "common_names": ["Alsatian"],
            "description": "A confident, courageous and versatile working and herding dog.",
            "history": "Standardised in Germany in 1899 by Max von Stephanitz from farm dogs.",
            "health": "Prone to hip and elbow dysplasia and degenerative myelopathy.",
            "origin": "Germany",
            "colors": ["Black", "Tan", "Sable"],
            "average_height": 60,
            "average_weight": 34,
            "average_life_expectancy": 11,
            "exercise_required": 5,
            "ease_of_training": 5,
            "affection": 4,
            "playfulness": 4,
            "good_with_children": 4,
            "good_with_dogs": 3,
            "grooming_required": 3,
        },
    ],
    "Sporting": [
        {
            "name": "Labrador Retriever",
            "common_names": ["Lab"],
            "description": "A friendly, outgoing retriever and one of the most popular family dogs.",
            "history": "Descended from St. John's water dogs brought from Newfoundland to Britain.",
            "fun_fact": "Labradors have webbed toes that make them strong swimmers.",
            "health": "Prone to obesity, hip dysplasia and exercise-induced collapse.",
            "origin": "Newfoundland, Canada",
            "colors": ["Black", "Yellow", "Chocolate"],
            "average_height": 57,
            "average_weight": 32,
            "average_life_expectancy": 12,
            "exercise_required": 4,
            "ease_of_training": 5,
            "affection": 5,
            "playfulness": 5,
            "good_with_children": 5,
            "good_with_dogs": 5,
            "grooming_required": 2,
        },
    ],
    "Toy": [
        {
            "name": "Chihuahua",
            "description": "A tiny, alert dog with a big personality and a loyal streak.",
            "history": "Named after the Mexican state of Chihuahua, linked to the ancient Techichi.",
            "health": "Watch for dental disease, patellar luxation and heart problems.",
            "origin": "Mexico",
            "colors": ["Fawn", "Black", "White", "Chocolate"],
            "average_height": 20,
            "average_weight": 2.5,
            "average_life_expectancy": 16,
            "exercise_required": 2,
            "ease_of_training": 3,
            "affection": 4,
            "playfulness": 3,
            "good_with_children": 2,
            "good_with_dogs": 2,
            "grooming_required": 1,
        },
        {
            "name": "Pug",
            "description": "A charming, mischievous companion with a wrinkled face and curled tail.",
            "history": "Kept by Chinese emperors for centuries before reaching Europe.",
            "fun_fact": "A group of pugs is called a grumble.",
            "health": "Brachycephalic breathing problems, eye injuries and skin fold infections.",
            "origin": "China",
            "colors": ["Fawn", "Black"],
            "average_height": 30,
            "average_weight": 8,
            "average_life_expectancy": 13,
            "exercise_required": 2,
            "ease_of_training": 3,
            "affection": 5,
            "playfulness": 4,
            "good_with_children": 5,
            "good_with_dogs": 4,
            "grooming_required": 2,
        },
    ],
    "Working": [
        {
            "name": "Siberian Husky",
            "common_names": ["Husky"],
            "description": "A medium-sized sled dog with great endurance and a friendly nature.",
            "history": "Bred by the Chukchi people of Siberia to pull sleds over long distances.",
            "fun_fact": "Huskies ran diphtheria serum to Nome, Alaska, in the 1925 serum run.",
            "health": "Generally healthy; watch for cataracts and progressive retinal atrophy.",
            "origin": "Siberia, Russia",
            "colors": ["Black", "White", "Grey", "Red"],
            "average_height": 56,
            "average_weight": 23,
            "average_life_expectancy": 13,
            "exercise_required": 5,
            "ease_of_training": 2,
            "affection": 4,
            "playfulness": 5,
            "good_with_children": 4,
            "good_with_dogs": 5,
            "grooming_required": 4,
        },
    ],
}


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Breed))
    db.execute(delete(Category))
    db.commit()
    print("Data cleared.")


def upsert(db: Session, model: type, data: dict):
    """Insert a row, or update the existing row with the same name."""
    instance = db.execute(
        select(model).where(model.name == data["name"])
    ).scalar_one_or_none()

    if instance is None:
        instance = model(**data)
        db.add(instance)
    else:
        for key, value in data.items():
            setattr(instance, key, value)
    return instance


def seed_categories(db: Session) -> dict[str, Category]:
    """Upsert sample categories."""
    print("Seeding categories...")
    categories = {}
    for data in CATEGORIES:
        category = upsert(db, Category, validate_input(CategoryCreate, data))
        categories[category.name] = category

    db.commit()
    for category in categories.values():
        db.refresh(category)

    print(f"Seeded {len(categories)} categories.")
    return categories


def seed_breeds(db: Session, categories: dict[str, Category]) -> int:
    """Validate and upsert sample breeds. Invalid breeds are reported and skipped."""
    seeded = 0
    for category_name, breeds in BREEDS.items():
        category = categories[category_name]
        print(f"Seeding {len(breeds)} {category_name} breeds...")

        for data in breeds:
            try:
                values = validate_input(BreedCreate, {**data, "category_id": category.id})
            except ValidationError as e:
                print(f"  - Skipping {data.get('name', 'unknown breed')}: {e.message}")
                continue
            upsert(db, Breed, values)
            seeded += 1

    db.commit()
    print(f"Seeded {seeded} breeds.")
    return seeded


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        categories = seed_categories(db)
        breed_count = seed_breeds(db, categories)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Categories: {len(categories)}")
        print(f"  - Breeds: {breed_count}")
        print("\nGraphQL endpoint at http://localhost:4000/graphql")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database(clear_existing="--keep" not in sys.argv[1:])
