#!/usr/bin/env python3
"""
Seed script: creates sample pizzas via the API (no direct cluster access).
Run: API must be running.
  python scripts/seed_pizzas.py
  python scripts/seed_pizzas.py --count 50 --base-url http://127.0.0.1:8080
"""

import argparse
import random

import httpx

API_BASE = "http://127.0.0.1:8080"

PIZZAS = [
    ("Margherita", "Classic", ["tomato", "mozzarella", "basil"]),
    ("Marinara", "No cheese, lots of garlic", ["tomato", "garlic", "oregano", "olive oil"]),
    ("Quattro Formaggi", "Four cheeses", ["mozzarella", "gorgonzola", "parmesan", "fontina"]),
    ("Diavola", "Spicy salami", ["tomato", "mozzarella", "spicy salami", "chili"]),
    ("Capricciosa", "A bit of everything", ["tomato", "mozzarella", "ham", "mushrooms", "artichokes", "olives"]),
    ("Funghi", "Mushroom lovers", ["tomato", "mozzarella", "mushrooms"]),
    ("Hawaii", "Controversial", ["tomato", "mozzarella", "ham", "pineapple"]),
    ("Ortolana", "Garden vegetables", ["tomato", "mozzarella", "zucchini", "eggplant", "peppers"]),
]

PRICES = [6.5, 7.0, 8.5, 9.0, 9.5, 10.5, 12.0]


def main():
    ap = argparse.ArgumentParser(description="Seed pizzas via API")
    ap.add_argument("--count", type=int, default=len(PIZZAS), help="Number of pizzas to create")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        for i in range(args.count):
            name, description, ingredients = PIZZAS[i % len(PIZZAS)]
            try:
                r = client.post(
                    "/pizza",
                    json={
                        "name": name,
                        "description": description,
                        "price": random.choice(PRICES),
                        "ingredients": ingredients,
                    },
                )
            except httpx.HTTPError as e:
                errors.append(f"{name}: {e}")
                continue
            if r.status_code == 200:
                created += 1
                print(f"  {r.json()['id']}  {name}")
            else:
                errors.append(f"{name}: {r.status_code} {r.text[:80]}")

    print(f"\nDone. Pizzas created: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)


if __name__ == "__main__":
    main()
