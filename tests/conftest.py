"""Shared fixtures for the test-suite."""

from __future__ import annotations

import pathlib
import sys
from typing import Any

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from reactor_insight.config import Settings, reset_settings_cache  # noqa: E402
from reactor_insight.domain.entities import Page  # noqa: E402


def make_record(
    record_id: str, record_type: str = "rules", **attributes: Any
) -> dict[str, Any]:
    """Return a raw JSON:API record with the links the shaper strips off."""

    return {
        "id": record_id,
        "type": record_type,
        "attributes": attributes,
        "links": {"self": f"https://reactor.example/{record_type}/{record_id}"},
        "relationships": {"property": {"data": {"id": "PR1", "type": "properties"}}},
    }


def _result(value: Any) -> Any:
    if isinstance(value, BaseException):
        raise value
    return value


class FakeReactorClient:
    """In-memory stand-in for ``ReactorClient``.

    Listings are given as a list of pages (each a list of raw records); a
    single flat list is treated as one page. Any configured value that is an
    exception instance is raised instead of returned.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        companies: list | None = None,
        properties: list | None = None,
        rules: list | None = None,
        data_elements: list | None = None,
        libraries: list | None = None,
        extensions: list | None = None,
        environments: list | None = None,
        callbacks: list | None = None,
        components: dict[str, Any] | None = None,
        owners: dict[str, Any] | None = None,
        rule_documents: dict[str, Any] | None = None,
        property_record: Any = None,
        search_results: list | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.companies = companies or []
        self.properties = properties or []
        self.rules = rules or []
        self.data_elements = data_elements or []
        self.libraries = libraries or []
        self.extensions = extensions or []
        self.environments = environments or []
        self.callbacks = callbacks or []
        self.components = components or {}
        self.owners = owners or {}
        self.rule_documents = rule_documents or {}
        self.property_record = property_record
        self.search_results = list(search_results or [])
        self.calls: list[tuple[Any, ...]] = []
        self.search_queries: list[dict[str, Any]] = []

    @staticmethod
    def _page(collection: Any, page_number: int | None) -> Page:
        collection = _result(collection)
        pages = collection if collection and isinstance(collection[0], list) else [collection]
        index = (page_number or 1) - 1
        items = pages[index] if index < len(pages) else []
        next_page = index + 2 if index + 1 < len(pages) else None
        return Page(items=list(items), next_page=next_page)

    async def list_companies(self, page_number=None, page_size=None) -> Page:
        self.calls.append(("companies", page_number, page_size))
        return self._page(self.companies, page_number)

    async def list_properties_for_company(self, company_id, page_number=None, page_size=None):
        self.calls.append(("properties", company_id, page_number, page_size))
        return self._page(self.properties, page_number)

    async def list_rules_for_property(self, property_id, page_number=None, page_size=None):
        self.calls.append(("rules", property_id, page_number, page_size))
        return self._page(self.rules, page_number)

    async def list_data_elements_for_property(
        self, property_id, page_number=None, page_size=None
    ):
        self.calls.append(("data_elements", property_id, page_number, page_size))
        return self._page(self.data_elements, page_number)

    async def list_libraries_for_property(self, property_id, page_number=None, page_size=None):
        self.calls.append(("libraries", property_id, page_number, page_size))
        return self._page(self.libraries, page_number)

    async def list_extensions_for_property(self, property_id, page_number=None, page_size=None):
        self.calls.append(("extensions", property_id, page_number, page_size))
        return self._page(self.extensions, page_number)

    async def list_environments_for_property(
        self, property_id, page_number=None, page_size=None
    ):
        self.calls.append(("environments", property_id, page_number, page_size))
        return self._page(self.environments, page_number)

    async def list_callbacks_for_property(self, property_id, page_number=None, page_size=None):
        self.calls.append(("callbacks", property_id, page_number, page_size))
        return self._page(self.callbacks, page_number)

    async def list_rule_components_for_rule(self, rule_id, page_number=None, page_size=None):
        self.calls.append(("rule_components", rule_id, page_number, page_size))
        return self._page(self.components.get(rule_id, []), page_number)

    async def list_rules_for_rule_component(self, rule_component_id):
        self.calls.append(("owners", rule_component_id))
        return list(_result(self.owners.get(rule_component_id, [])))

    async def get_property(self, property_id):
        self.calls.append(("property", property_id))
        return _result(self.property_record or {"id": property_id, "attributes": {}})

    async def get_rule(self, rule_id, *, include=None):
        self.calls.append(("rule", rule_id, include))
        return _result(self.rule_documents[rule_id])

    async def search(self, query):
        self.search_queries.append(query)
        response = self.search_results.pop(0) if self.search_results else {"data": []}
        if callable(response):
            response = response(query)
        return _result(response)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from a clean cache."""

    reset_settings_cache()
    yield
    reset_settings_cache()
