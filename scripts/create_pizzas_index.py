#!/usr/bin/env python3
"""
Create the 'pizzas_dev' index with its mapping on the Elastic Cloud cluster.
The API tries this at startup too; use the script when the API key it runs
with has no index-management privileges.
  python scripts/create_pizzas_index.py
  python scripts/create_pizzas_index.py --recreate

Reads API_KEY, API_KEY_ID and CLOUD_ID from the environment or .env.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from elasticsearch import Elasticsearch

from pizza_api.search.elasticsearch_client import (
    PIZZAS_INDEX,
    _es_client_options,
    _pizzas_index_mappings,
)


def main():
    ap = argparse.ArgumentParser(description="Create the pizzas index")
    ap.add_argument("--recreate", action="store_true", help="Delete the index first (drops all pizzas)")
    args = ap.parse_args()

    es = Elasticsearch(**_es_client_options())
    try:
        if es.indices.exists(index=PIZZAS_INDEX):
            if not args.recreate:
                print(f"Index '{PIZZAS_INDEX}' already exists. Use --recreate to drop and create it again.")
                return
            es.indices.delete(index=PIZZAS_INDEX)
            print(f"Deleted index '{PIZZAS_INDEX}'.")
        es.indices.create(index=PIZZAS_INDEX, mappings=_pizzas_index_mappings())
    finally:
        es.close()
    print(f"Created index '{PIZZAS_INDEX}'.")


if __name__ == "__main__":
    main()
