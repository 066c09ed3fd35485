from .Data import *

import numpy as np
from numpy.random import default_rng


class DataGenParam:
    # Parameters used to generate random instances

    def __init__(self, capacity_ratio=1.2, corr_cap_pop=0.21, mean_pref=2.42, sigma_pref=1.05,
                 CV_cap=0.8, CV_pop=0.6, exclude_prob=0.1, min_capacity=1):
        self.capacity_ratio = capacity_ratio
        self.corr_cap_pop = corr_cap_pop
        self.mean_pref = mean_pref
        self.sigma_pref = sigma_pref
        self.CV_cap = CV_cap
        self.CV_pop = CV_pop
        self.exclude_prob = exclude_prob
        self.min_capacity = min_capacity


def generate_data(n_applicants: int, n_slots: int, parameters: DataGenParam = None, print_data=False, seed=None):
    """
    Generate a random instance.

    Parameters:
    - n_applicants: Number of applicants.
    - n_slots: Number of slots.
    - parameters: An instance of DataGenParam with generation parameters.
    - print_data: Whether to print the generated data.
    - seed: Random seed (or numpy Generator) for reproducibility.

    Returns:
    - A list of Applicant objects and a list of Slot objects
    """
    if parameters is None:
        parameters = DataGenParam()
    rng = default_rng(seed)

    # Capacities and popularities are correlated normals
    capacity_aid = rng.normal(0, 1, n_slots)
    popularity_aid = rng.normal(0, 1, n_slots)
    covar = np.array([
        [1, parameters.corr_cap_pop],
        [parameters.corr_cap_pop, 1]
    ])
    G = np.linalg.cholesky(covar)
    capacity_aid, popularity_aid = G @ np.vstack((capacity_aid, popularity_aid))

    capacity_total = parameters.capacity_ratio * n_applicants
    capacities = np.round((capacity_total / n_slots) * (1 + parameters.CV_cap * (capacity_aid - np.mean(capacity_aid))))
    capacities = np.clip(capacities, parameters.min_capacity, None).astype(int)

    popularity = np.clip(1 + parameters.CV_pop * (popularity_aid - np.mean(popularity_aid)), 0.2, None)

    pref_lengths = rng.normal(parameters.mean_pref, parameters.sigma_pref, n_applicants)
    pref_lengths = np.clip(pref_lengths, 0, n_slots).astype(int)

    slots = [Slot(f"S{j}", capacities[j]) for j in range(n_slots)]

    applicants = []
    for i in range(n_applicants):
        # Sample without replacement, weighted by popularity
        weights = popularity / np.sum(popularity)
        chosen = rng.choice(n_slots, size=pref_lengths[i], replace=False, p=weights)
        preferences = [slots[j] for j in chosen]

        others = [s for s in slots if s not in preferences]
        excluded = [s for s in others if rng.random() < parameters.exclude_prob]
        applicants.append(Applicant(f"A{i}", preferences, excluded))

    if print_data:
        print(f"Generated data with {n_applicants} applicants and {n_slots} slots.")
        print(f"Capacities: {[s.capacity for s in slots]}")
        for a in applicants:
            print(f"{a.name}\t{list(a.preferences)}\texcluded: {sorted(a.excluded)}")

    return applicants, slots
