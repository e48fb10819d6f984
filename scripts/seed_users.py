#!/usr/bin/env python3
"""
Seed script: registers demo users via the API (no direct DB).
Run: API must be running.
  python scripts/seed_users.py
  python scripts/seed_users.py --users 50
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api"

FIRST_NAMES = ["Ada", "Grace", "Linus", "Barbara", "Ken", "Margaret", "Dennis", "Radia"]
LAST_NAMES = ["Lovelace", "Hopper", "Torvalds", "Liskov", "Thompson", "Hamilton", "Ritchie"]

# Satisfies the password policy: upper, lower, digit, special, 8-71 chars.
DEMO_PASSWORD = "Thingful1!demo"


def random_full_name() -> str:
    return f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"


def main():
    ap = argparse.ArgumentParser(description="Seed users via API")
    ap.add_argument("--users", type=int, default=20, help="Number of users to create")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    skipped = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        for i in range(args.users):
            user_name = f"demo_user_{i + 1}"
            body = {
                "user_name": user_name,
                "password": DEMO_PASSWORD,
                "full_name": random_full_name(),
            }
            if random.random() > 0.5:
                body["nickname"] = user_name.replace("demo_user_", "demo")
            try:
                r = client.post("/users", json=body)
            except httpx.HTTPError as e:
                errors.append(f"Register {user_name}: {e}")
                continue
            if r.status_code == 201:
                created += 1
            elif r.status_code == 400 and r.json().get("error") == "Username already taken":
                skipped += 1
            else:
                errors.append(f"Register {user_name}: {r.status_code} {r.text[:80]}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i + 1} users")

    print(f"\nDone. Created: {created}, already present: {skipped}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
