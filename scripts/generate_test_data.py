#!/usr/bin/env python3
"""
Generate randomized certificate records and send them to the API.

Usage:
    # Create 25 records
    python scripts/generate_test_data.py --count 25

    # Against another host, with a fixed seed for repeatable data
    python scripts/generate_test_data.py --count 10 --api-url http://registry:8000 --seed 42
"""

import argparse
import random
from datetime import date, timedelta
from typing import Dict, Any

import requests
from faker import Faker

# Polish locale for realistic names, places and addresses
fake = Faker("pl_PL")


def random_customer() -> Dict[str, Any]:
    """
    Build one random customer payload for POST /api/v1/customers.

    Dates are consistent: birth < death <= issue date.
    """
    sex = random.choice(["K", "M"])
    if sex == "K":
        name, surname = fake.first_name_female(), fake.last_name_female()
    else:
        name, surname = fake.first_name_male(), fake.last_name_male()

    date_of_death = fake.date_between(start_date="-5y", end_date="today")
    date_of_birth = fake.date_between(
        start_date=date_of_death - timedelta(days=100 * 365),
        end_date=date_of_death - timedelta(days=18 * 365),
    )
    issue_date = min(date_of_death + timedelta(days=random.randint(0, 14)), date.today())
    registry_office = fake.city()

    return {
        "name": name,
        "surname": surname,
        "certificate_number": f"SW/{date_of_death.year}/{fake.unique.random_int(1, 99999):05d}",
        "sex": sex,
        "date_of_birth": date_of_birth.isoformat(),
        "place_of_birth": fake.city(),
        "date_of_death": date_of_death.isoformat(),
        "place_of_death": registry_office,
        "death_certificate_number": fake.bothify("AZ-####/") + str(date_of_death.year),
        "issue_date": issue_date.isoformat(),
        "issued_by": f"USC {registry_office}",
        "address": fake.address().replace("\n", ", "),
    }


def send_customer_to_api(customer: Dict[str, Any], api_url: str) -> Dict[str, Any]:
    """
    Send a customer record to the registry API.

    Returns:
        API response as dictionary
    """
    endpoint = f"{api_url}/api/v1/customers"
    response = requests.post(endpoint, json=customer, timeout=10)
    response.raise_for_status()
    return response.json()


def main():
    parser = argparse.ArgumentParser(description="Seed the certificate registry with fake records")
    parser.add_argument("--count", type=int, default=20, help="Number of records to create")
    parser.add_argument("--api-url", default="http://localhost:8000", help="Base URL of the API")
    parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable data")
    args = parser.parse_args()

    if args.seed is not None:
        Faker.seed(args.seed)
        random.seed(args.seed)

    created = 0
    for i in range(args.count):
        customer = random_customer()
        try:
            result = send_customer_to_api(customer, args.api_url)
            created += 1
            print(f"✓ [{i + 1}/{args.count}] {result['name']} {result['surname']} (id {result['id']})")
        except requests.RequestException as e:
            print(f"✗ [{i + 1}/{args.count}] Failed to create {customer['name']} {customer['surname']}: {e}")

    print(f"\nCreated {created} of {args.count} records")


if __name__ == "__main__":
    main()
