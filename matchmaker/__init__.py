"""
Fair matching of applicants to capacity-limited slots.

At this time only Deferred Acceptance with Single Tie-Breaking (DA_STB) is implemented,
other algorithms can be added to matchmaker.Matching.ALGORITHMS.
"""
from .Data import Slot, Applicant, UnknownSlotReference, DuplicateIdentifier, validate_instance
from .Assignment import MatchResult
from .DA_STB import generate_priority_order, match_students, match_students_to_multiple_categories
from .Matching import ALGORITHMS, match
from .DataGen import DataGenParam, generate_data
