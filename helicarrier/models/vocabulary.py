"""
Closed vocabularies used by the card and product documents.

Enum values are the exact strings used in the documents, so a document
value that is not listed here fails validation.
"""

from enum import Enum


class Aspect(str, Enum):
    """Aspect of a player card."""

    BASIC = "Basic"
    AGGRESSION = "Aggression"
    LEADERSHIP = "Leadership"
    PROTECTION = "Protection"
    JUSTICE = "Justice"


class Resource(str, Enum):
    """Resource icons printed on player cards."""

    ENERGY = ":energy:"
    MENTAL = ":mental:"
    PHYSICAL = ":physical:"
    WILD = ":wild:"


class SideSchemeIcon(str, Enum):
    """Icons printed on side schemes."""

    ACCELERATION = ":acceleration:"
    CRISIS = ":crisis:"
    HAZARD = ":hazard:"


class Side(str, Enum):
    """Printed side of an identity card."""

    A = "A"
    B = "B"
    # Ant-Man and Wasp giant/tiny forms
    C = "C"


class Trait(str, Enum):
    """Card traits."""

    AERIAL = "Aerial"
    ARMOR = "Armor"
    ATTACK = "Attack"
    ATTORNEY = "Attorney"
    AVENGER = "Avenger"
    BRUTE = "Brute"
    CONDITION = "Condition"
    CRIMINAL = "Criminal"
    DEFENSE = "Defense"
    ELITE = "Elite"
    GAMMA = "Gamma"
    GENIUS = "Genius"
    HERO_FOR_HIRE = "Hero for Hire"
    KREE = "Kree"
    ITEM = "Item"
    LOCATION = "Location"
    PERSONA = "Persona"
    SKILL = "Skill"
    SHIELD = "S.H.I.E.L.D."
    SOLDIER = "Soldier"
    SPY = "Spy"
    SUPERPOWER = "Superpower"
    TECH = "Tech"
    THWART = "Thwart"


class ProductType(str, Enum):
    """Kind of purchasable product."""

    CORE_SET = "Core Set"
    CAMPAIGN_EXPANSION = "Campaign Expansion"
    HERO_PACK = "Hero Pack"
    SCENARIO_PACK = "Scenario Pack"
    CUSTOM = "Custom"


class SetType(str, Enum):
    """Kind of card set inside a product."""

    HERO_SIGNATURE = "Hero Signature"
    MODULAR_ENCOUNTER = "Modular Encounter"
    NEMESIS = "Nemesis"
    VILLAIN = "Villain"
