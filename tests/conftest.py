"""
Shared fixtures for the study-aid pipeline tests
"""
import random

import pytest


MAMMALS_TEXT = (
    "Cats are mammals. Dogs are mammals too. Mammals have fur. "
    "This document discusses mammals and their characteristics in detail across many contexts."
)


class ReverseShuffle:
    """Deterministic stand-in for random: reverses the list in place"""

    def shuffle(self, items):
        items.reverse()


@pytest.fixture
def mammals_text():
    return MAMMALS_TEXT


@pytest.fixture
def long_text():
    """Twelve sentences about photosynthesis on separate lines"""
    sentences = [
        "Photosynthesis converts light energy into chemical energy inside plant cells",
        "Chlorophyll absorbs sunlight mostly in the blue and red wavelengths",
        "The light reactions happen within the thylakoid membranes",
        "Water molecules are split and oxygen is released as a byproduct",
        "The Calvin cycle fixes carbon dioxide into sugars",
        "Enzymes such as rubisco drive carbon fixation forward",
        "Glucose produced by photosynthesis fuels plant growth",
        "Temperature strongly influences enzyme activity during photosynthesis",
        "Light intensity limits the overall photosynthesis rate",
        "Farmers manage greenhouse lighting to boost crop yields",
        "Researchers study photosynthesis to design better solar panels",
        "Photosynthesis remains essential for nearly every ecosystem on Earth",
    ]
    return ".\n".join(sentences) + "."


@pytest.fixture
def reverse_rng():
    return ReverseShuffle()


@pytest.fixture
def seeded_rng():
    return random.Random(42)
