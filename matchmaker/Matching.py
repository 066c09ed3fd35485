from .DA_STB import DA_STB

# The different matching algorithms that can be used.
# Every entry takes (applicants, slots, rng, **options) and returns a MatchResult.
ALGORITHMS = {
    "DA_STB": DA_STB,
}


def match(applicants: list, slots: list, rng, algorithm = "DA_STB", **kwargs):
    """
    Match applicants to slots with the chosen algorithm.

    Parameters:
    - applicants: list of Applicant objects
    - slots: list of Slot objects
    - rng: numpy Generator (or a seed) used for the tie-breaking
    - algorithm: string that determines which algorithm is used
        - 'DA_STB': deferred acceptance with single tie-breaking
    - kwargs: passed on to the algorithm (e.g. multiple, fill_random, print_out)

    Returns:
    - An instance of the MatchResult class
    """
    algorithm_list = list(ALGORITHMS)
    if algorithm not in algorithm_list:
        raise ValueError(f"Invalid value: '{algorithm}'. Allowed values are: {algorithm_list}")

    return ALGORITHMS[algorithm](applicants, slots, rng, **kwargs)
