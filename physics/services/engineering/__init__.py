"""
Engineering Service: the solid mechanics, thermal and heat transfer
formulas, mounted a second time under /api/v1/engineering.

The formulas are the same records the physics services use, so both
URL trees validate and compute identically.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.services import FormulaService
from physics.services import heat_transfer, solid_mechanics, thermal


class EngineeringService(FormulaService):

    id = "engineering"
    name = "Engineering"
    description = "Elasticity, thermal expansion, heat engines and heat transfer"
    category = "engineering"

    def formulas(self):
        return solid_mechanics.FORMULAS + thermal.FORMULAS + heat_transfer.FORMULAS
