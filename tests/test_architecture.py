"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters depend on the domain, never on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything outside the domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("ns_departures.domain.models*")
        .should_not_import("ns_departures.adapters*")
        .should_not_import("ns_departures.application*")
        .should_not_import("ns_departures.domain.contracts*")
        .should_not_import("ns_departures.domain.ports*")
        .may_import("ns_departures.domain.models*")
        .check("ns_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("ns_departures.domain.contracts*")
        .should_not_import("ns_departures.adapters*")
        .should_not_import("ns_departures.application*")
        .may_import("ns_departures.domain*")
        .check("ns_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("ns_departures.domain.ports*")
        .should_not_import("ns_departures.adapters*")
        .should_not_import("ns_departures.application*")
        .may_import("ns_departures.domain*")
        .check("ns_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("ns_departures.application*")
        .should_not_import("ns_departures.adapters*")
        .may_import("ns_departures.domain*")
        .may_import("ns_departures.application*")
        .check("ns_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters, the tracker included, should reach the orchestrator only through domain ports."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("ns_departures.adapters*")
        .should_not_import("ns_departures.application*")
        .may_import("ns_departures.domain*")
        .may_import("ns_departures.adapters*")
        .check("ns_departures", only_direct_imports=True)
    )
