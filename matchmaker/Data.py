import copy
import numbers


class UnknownSlotReference(ValueError):
    """An applicant refers to a slot that is not part of the instance."""


class DuplicateIdentifier(ValueError):
    """Two slots or two applicants share a name, or a preference list repeats a slot."""


class Slot:
    """
    Class Slot:
    A category (activity, school, ...) that accepts at most 'capacity' applicants.

    Arguments for initialization:
    - name (str): Unique identifier of the slot.
    - capacity (int): Maximum number of applicants the slot accepts (>= 0).
    """

    def __init__(self, name: str, capacity: int):
        # numpy integers are accepted, e.g. capacities taken from an array
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral) or capacity < 0:
            raise ValueError(f"Invalid value: capacity of slot '{name}' must be a non-negative integer, got {capacity!r}")
        self.name = name
        self.capacity = int(capacity)

    def __eq__(self, other):
        return isinstance(other, Slot) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Slot({self.name!r}, {self.capacity})"


def slot_name(slot) -> str:
    # Preferences and exclusions accept Slot objects or plain names
    if isinstance(slot, Slot):
        return slot.name
    return slot


class Applicant:
    """
    Class Applicant:
    Someone who wants to be placed in one (or more) slots.

    Arguments for initialization:
    - name (str): Unique identifier of the applicant.
    - preferences (list): Slots (or slot names), most preferred first.
    - excluded (list): Slots (or slot names) the applicant refuses.
        Exclusion always wins over a preference.
    """

    def __init__(self, name: str, preferences: list = None, excluded: list = None):
        for arg, value in [("preferences", preferences), ("excluded", excluded)]:
            if isinstance(value, str):
                raise ValueError(f"Invalid value: {arg} of applicant '{name}' must be a list of slots, got the string {value!r}")
        self.name = name
        # Stored as immutable copies, the engine keeps its own cursors
        self.preferences = tuple(slot_name(s) for s in copy.copy(preferences or []))
        self.excluded = frozenset(slot_name(s) for s in copy.copy(excluded or []))

    def acceptable(self) -> tuple:
        """Preferences with the excluded slots removed, in order."""
        return tuple(s for s in self.preferences if s not in self.excluded)

    def rank_of(self, slot):
        """1-based position of 'slot' in the preferences, None if not ranked."""
        name = slot_name(slot)
        if name in self.preferences:
            return self.preferences.index(name) + 1
        return None

    def __eq__(self, other):
        return isinstance(other, Applicant) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Applicant({self.name!r}, preferences={list(self.preferences)}, excluded={sorted(self.excluded)})"

    def __str__(self):
        return str(self.name)


def validate_instance(applicants: list, slots: list):
    """
    Checks the input of a matching run before anything is computed.

    Raises:
    - DuplicateIdentifier: two slots with the same name, two applicants with the same name,
        or a slot that appears twice in one preference list
    - UnknownSlotReference: a preferred or excluded slot that is not in 'slots'

    Returns:
    - A dictionary slot name -> Slot
    """
    slot_by_name = {}
    for s in slots:
        if s.name in slot_by_name:
            raise DuplicateIdentifier(f"Invalid value: slot name '{s.name}' is used more than once")
        slot_by_name[s.name] = s

    seen = set()
    for a in applicants:
        if a.name in seen:
            raise DuplicateIdentifier(f"Invalid value: applicant name '{a.name}' is used more than once")
        seen.add(a.name)

        if len(set(a.preferences)) != len(a.preferences):
            raise DuplicateIdentifier(f"Invalid value: applicant '{a.name}' ranks a slot more than once: {list(a.preferences)}")

        for name in list(a.preferences) + sorted(a.excluded):
            if name not in slot_by_name:
                raise UnknownSlotReference(f"Invalid value: applicant '{a.name}' refers to unknown slot '{name}'. Known slots are: {list(slot_by_name)}")

    return slot_by_name
