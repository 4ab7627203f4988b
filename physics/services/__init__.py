"""
Formula service layer: FormulaService ABC and FormulaRegistry.

Each topic (mechanics, electromagnetism, optics, ...) is a
FormulaService registered with the FormulaRegistry. A service owns a
list of Formula records and mounts one POST endpoint per formula under
its category prefix:

    POST /api/v1/<category>/<slug>

The registry provides lookup by service id and by (category, slug), and
refuses registrations that would mount two formulas on the same URL.

Classes:
    FormulaService  - Abstract base class for all formula services
    FormulaRegistry - Central lookup container for registered services

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from abc import ABC, abstractmethod

from physics.adapter import handle_calculation_request


class FormulaService(ABC):
    """
    Abstract base class for a group of related formulas.

    Class Attributes
    ----------------
    id : str
        Unique service identifier (e.g. "mechanics").
    name : str
        Human-readable display name (e.g. "Mechanics").
    description : str
        One-liner for the service listing.
    category : str
        URL category the formulas are mounted under: "physics" or
        "engineering".
    """

    id = ""
    name = ""
    description = ""
    category = "physics"

    @abstractmethod
    def formulas(self):
        """
        Return the formulas this service exposes.

        Returns
        -------
        list of Formula
            In the order they should be listed.
        """

    def get(self, slug):
        """Formula with the given slug, or None."""
        for formula in self.formulas():
            if formula.slug == slug:
                return formula
        return None

    def register_routes(self, blueprint):
        """
        Mount one POST endpoint per formula onto a Flask blueprint.

        Parameters
        ----------
        blueprint : flask.Blueprint
            The API blueprint to mount routes on.
        """
        for formula in self.formulas():
            blueprint.add_url_rule(
                "/{}/{}".format(self.category, formula.slug),
                endpoint="{}_{}_{}".format(
                    self.category, self.id, formula.slug.replace("-", "_")),
                view_func=handle_calculation_request(formula),
                methods=["POST"],
            )

    def metadata(self):
        """
        Return service metadata for the service listing.

        Returns
        -------
        dict
            Service info: id, name, description, category, formula slugs.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "formulas": [f.slug for f in self.formulas()],
        }


class FormulaRegistry:
    """
    Central lookup container for registered FormulaService instances.

    Services register at app startup. The registry provides lookup by
    id, lookup of a formula by category and slug, and iteration for
    route mounting.
    """

    def __init__(self):
        self._services = {}
        self._routes = {}

    def register(self, service):
        """
        Register a service instance.

        Parameters
        ----------
        service : FormulaService
            The service to register. Must have a unique id, and none of
            its formulas may share a URL with an already registered one.

        Raises
        ------
        ValueError
            If the id or any (category, slug) pair is already taken.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        routes = {}
        for formula in service.formulas():
            key = (service.category, formula.slug)
            if key in self._routes or key in routes:
                raise ValueError(
                    "Formula '{}/{}' is already registered".format(*key)
                )
            routes[key] = formula
        self._services[service.id] = service
        self._routes.update(routes)

    def get(self, service_id):
        """
        Look up a service by id.

        Returns
        -------
        FormulaService or None
        """
        return self._services.get(service_id)

    def find(self, category, slug):
        """Formula mounted at /<category>/<slug>, or None."""
        return self._routes.get((category, slug))

    def categories(self):
        """Distinct categories, in registration order."""
        seen = []
        for service in self._services.values():
            if service.category not in seen:
                seen.append(service.category)
        return seen

    def formulas(self, category, search=None):
        """
        Formulas of one category, optionally filtered by a search term.

        Parameters
        ----------
        category : str
        search : str, optional
            Case-insensitive substring matched against slug, equation and
            description.

        Returns
        -------
        list of Formula
        """
        found = [f for (cat, _), f in self._routes.items() if cat == category]
        if search:
            term = search.lower()
            found = [
                f for f in found
                if term in f.slug or term in f.equation.lower()
                or term in f.description.lower()
            ]
        return found

    def list_all(self):
        """
        Return metadata for all registered services.

        Returns
        -------
        list of dict
            One metadata dict per service, in registration order.
        """
        return [s.metadata() for s in self._services.values()]

    def services(self):
        """All registered service instances, in registration order."""
        return list(self._services.values())
