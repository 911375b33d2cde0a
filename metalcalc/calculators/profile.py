"""
Standard profile calculator (IPE, IPN, UPN, HEA, HEB).

Does not derive area from geometry. Looks up linear mass (kg/m) for the exact
designation, multiplies by length in meters, and scales by density / 7.85 for
materials other than steel.
"""

from .base import BaseCalculator
from ..errors import MissingInputError, UnknownLookupError
from ..weights import weight_from_profile


class StandardProfileCalculator(BaseCalculator):

    def weigh(self, dims, unit, density):
        designation = dims.size
        if designation is None or designation == "":
            raise MissingInputError("size (profile designation) is required")
        length_m = self.mm(dims, "length", unit) / 1000.0

        designation = str(designation).strip()
        kg_per_m = self.catalog.get_profile_weight(designation)
        if kg_per_m <= 0:
            raise UnknownLookupError(f"Invalid profile size: {designation}")
        return weight_from_profile(kg_per_m, length_m, density)
