#!/usr/bin/env python3
"""
Example client for the OpenAPI Components API.

This script demonstrates how to interact with the API to inspect the
components of a served document, add entries, and remove them either by
assigning null or through an explicit delete.
"""

from typing import Any, Dict, List, Optional

import httpx


class ComponentsClient:
    """Client for interacting with the OpenAPI Components API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        """Initialize the client with the API base URL."""
        self.base_url = base_url
        self.client = httpx.Client(base_url=base_url, timeout=30.0)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close the client."""
        self.client.close()

    def get_health(self) -> Dict:
        """Check API health status."""
        response = self.client.get("/health")
        response.raise_for_status()
        return response.json()

    def get_components(self) -> Dict[str, Any]:
        """Fetch the components object (empty kinds are omitted)."""
        response = self.client.get("/components")
        response.raise_for_status()
        return response.json()

    def get_component(self, kind: str, name: str) -> Optional[Dict[str, Any]]:
        """Fetch one entry, or None when it does not exist."""
        response = self.client.get(f"/components/{kind}/{name}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def put_component(
        self, kind: str, name: str, value: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Store an entry; passing None removes it."""
        response = self.client.put(f"/components/{kind}/{name}", json={"value": value})
        response.raise_for_status()
        return response.json()

    def delete_component(self, kind: str, name: str) -> bool:
        """Remove an entry; returns False when it was already absent."""
        response = self.client.delete(f"/components/{kind}/{name}")
        response.raise_for_status()
        return response.json()["removed"]

    def list_names(self) -> List[Dict[str, Any]]:
        """Per-kind name listing via GraphQL."""
        response = self.client.post(
            "/graphql", json={"query": "{ components { kind owner names } }"}
        )
        response.raise_for_status()
        return response.json()["data"]["components"]


def main():
    """Demonstrate API client usage."""

    print("OpenAPI Components API Client Example")
    print("=" * 50)

    with ComponentsClient() as client:
        # 1. Check health
        print("\n1. Checking API health...")
        health = client.get_health()
        print(f"   Status: {health['status']}")
        print(f"   Source: {health.get('source', 'unknown')}")

        # 2. Add a schema and a parameter
        print("\n2. Adding components...")
        schema = client.put_component(
            "schemas", "Pet", {"type": "object", "required": ["id"]}
        )
        parameter = client.put_component(
            "parameters", "limit", {"name": "limit", "in": "query"}
        )
        print(f"   schemas/Pet parent: {schema['parent']}")
        print(f"   parameters/limit parent: {parameter['parent']}")

        # 3. List what is stored
        print("\n3. Listing components...")
        for summary in client.list_names():
            print(f"   {summary['kind']} ({summary['owner']}): {', '.join(summary['names'])}")

        # 4. Remove by assigning null
        print("\n4. Removing schemas/Pet by assigning null...")
        result = client.put_component("schemas", "Pet", None)
        print(f"   Present after write: {result['present']}")
        print(f"   Lookup: {client.get_component('schemas', 'Pet')}")

        # 5. Remove explicitly (idempotent)
        print("\n5. Deleting parameters/limit twice...")
        print(f"   First delete removed: {client.delete_component('parameters', 'limit')}")
        print(f"   Second delete removed: {client.delete_component('parameters', 'limit')}")

        # 6. Final components object
        print("\n6. Components object:")
        print(f"   {client.get_components()}")


if __name__ == "__main__":
    try:
        main()
    except httpx.ConnectError:
        print("\nError: Could not connect to API server.")
        print("Make sure the server is running: python -m openapi_components.run_server")
