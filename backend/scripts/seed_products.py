#!/usr/bin/env python3
"""
Seed products from a CSV file through the same import pipeline the API uses.
Rows whose name already exists are reported as duplicates, so the script is
safe to run repeatedly.

Usage:
    python scripts/seed_products.py --file scripts/sample_products.csv
    python scripts/seed_products.py --reset
"""
import argparse
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.db import SessionLocal, init_db
from app.services.import_service import ImportService

DEFAULT_SOURCE = os.path.join(os.path.dirname(__file__), "sample_products.csv")


def seed_from_file(path: str, reset: bool = False):
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8-sig") as f:
        text = f.read()

    init_db(reset=reset)
    db = SessionLocal()
    try:
        result = ImportService(db).import_csv(text)
    finally:
        db.close()

    print(f"Seeded products: added={result.added} skipped={result.skipped}")
    for dup in result.duplicates:
        print(f"  already present: {dup.name} ({dup.existing_id})")
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=DEFAULT_SOURCE, help="Path to a products CSV (name,unit,category,brand,stock,status,image)")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    seed_from_file(args.file, reset=args.reset)
