"""Nationality and name pools for player generation."""

import random
from typing import Optional

# Share of the player population by nationality; "Other" expands below
NATIONALITY_WEIGHTS: dict[str, float] = {
    "USA": 0.73,
    "Canada": 0.07,
    "France": 0.025,
    "Germany": 0.02,
    "Australia": 0.02,
    "Spain": 0.015,
    "Serbia": 0.015,
    "Greece": 0.01,
    "Lithuania": 0.008,
    "Croatia": 0.008,
    "Slovenia": 0.005,
    "Turkey": 0.008,
    "Brazil": 0.008,
    "Argentina": 0.008,
    "Nigeria": 0.012,
    "Cameroon": 0.008,
    "Other": 0.037,
}

OTHER_NATIONALITIES = [
    "Italy", "Latvia", "Poland", "Israel", "Japan", "South Korea", "Mexico",
    "Dominican Republic",
]

FIRST_NAMES: dict[str, list[str]] = {
    "USA": [
        "Marcus", "Jalen", "Darius", "Tyrese", "Andre", "Malik", "Devon", "Cameron",
        "Isaiah", "Jordan", "Terrence", "Brandon", "Kendall", "Xavier", "Derrick",
        "Jamal", "Trey", "Corey", "Dante", "Reggie", "Quentin", "Elijah", "Myles",
    ],
    "Canada": [
        "Liam", "Owen", "Nolan", "Tristan", "Dillon", "Carter", "Mason", "Logan",
        "Kieran", "Rowan",
    ],
    "France": [
        "Hugo", "Theo", "Mathis", "Lucas", "Yanis", "Bastien", "Killian", "Enzo",
        "Remi", "Adrien",
    ],
    "Germany": [
        "Lukas", "Jonas", "Felix", "Moritz", "Niklas", "Tobias", "Jannik", "Fabian",
    ],
    "Australia": [
        "Jack", "Riley", "Brodie", "Lachlan", "Cooper", "Harrison", "Angus", "Declan",
    ],
    "Spain": ["Pablo", "Javier", "Alvaro", "Sergio", "Diego", "Marcos", "Iker", "Adrian"],
    "Serbia": ["Nikola", "Stefan", "Marko", "Luka", "Milos", "Vasilije", "Filip", "Dusan"],
    "Greece": ["Giorgos", "Nikos", "Kostas", "Dimitris", "Yannis", "Thanasis"],
    "Lithuania": ["Domantas", "Arnas", "Rokas", "Mantas", "Tomas", "Jonas"],
    "Croatia": ["Ivan", "Dario", "Mario", "Ante", "Luka", "Tomislav"],
    "Slovenia": ["Jaka", "Ziga", "Klemen", "Matic", "Rok"],
    "Turkey": ["Emre", "Cedi", "Furkan", "Alperen", "Burak", "Kerem"],
    "Brazil": ["Bruno", "Rafael", "Thiago", "Gabriel", "Lucas", "Caio"],
    "Argentina": ["Facundo", "Nicolas", "Gabriel", "Leandro", "Tomas", "Agustin"],
    "Nigeria": ["Chima", "Emeka", "Obinna", "Tunde", "Chuka", "Ike"],
    "Cameroon": ["Pascal", "Joel", "Yannick", "Christian", "Serge"],
}

LAST_NAMES: dict[str, list[str]] = {
    "USA": [
        "Johnson", "Williams", "Brown", "Davis", "Miller", "Wilson", "Moore", "Taylor",
        "Anderson", "Jackson", "Harris", "Thompson", "Robinson", "Walker", "Young",
        "Carter", "Mitchell", "Bridges", "Hayes", "Porter", "Banks", "Ellis", "Fox",
    ],
    "Canada": [
        "Campbell", "MacLeod", "Fraser", "Tremblay", "Gagnon", "Bouchard", "Murray",
        "Stewart", "Roy", "Wallace",
    ],
    "France": [
        "Martin", "Bernard", "Dubois", "Moreau", "Laurent", "Lefevre", "Garnier",
        "Fontaine", "Rousseau", "Blanc",
    ],
    "Germany": ["Muller", "Schmidt", "Fischer", "Weber", "Wagner", "Becker", "Hoffmann", "Koch"],
    "Australia": ["Smith", "Kelly", "Ryan", "O'Brien", "Walsh", "Murphy", "Doyle", "Lynch"],
    "Spain": ["Garcia", "Fernandez", "Lopez", "Martinez", "Sanchez", "Ruiz", "Moreno", "Navarro"],
    "Serbia": ["Jovanovic", "Petrovic", "Nikolic", "Markovic", "Djordjevic", "Ilic", "Pavlovic"],
    "Greece": ["Papadopoulos", "Georgiou", "Nikolaou", "Dimitriou", "Vlachos", "Kostas"],
    "Lithuania": ["Kazlauskas", "Petrauskas", "Jankauskas", "Butkus", "Stankevicius"],
    "Croatia": ["Horvat", "Kovacevic", "Babic", "Maric", "Juric", "Novak"],
    "Slovenia": ["Novak", "Horvat", "Krajnc", "Zupancic", "Potocnik"],
    "Turkey": ["Yilmaz", "Kaya", "Demir", "Sahin", "Celik", "Ozturk"],
    "Brazil": ["Silva", "Santos", "Oliveira", "Souza", "Costa", "Pereira"],
    "Argentina": ["Gonzalez", "Rodriguez", "Fernandez", "Diaz", "Alvarez", "Romero"],
    "Nigeria": ["Okafor", "Adeyemi", "Okonkwo", "Eze", "Nwosu", "Balogun"],
    "Cameroon": ["Mbah", "Ngono", "Fotsing", "Tchamba", "Eto"],
}

MAX_NAME_ATTEMPTS = 50


def select_nationality(rng: Optional[random.Random] = None) -> str:
    """Draw a nationality from the population weights."""
    rng = rng or random.Random()
    roll = rng.random()
    cumulative = 0.0
    for nationality, weight in NATIONALITY_WEIGHTS.items():
        cumulative += weight
        if roll <= cumulative:
            if nationality == "Other":
                return rng.choice(OTHER_NATIONALITIES)
            return nationality
    return "USA"


def generate_name(nationality: str, rng: Optional[random.Random] = None) -> tuple[str, str]:
    """Return (first, last) from the nationality's pools, falling back to USA."""
    rng = rng or random.Random()
    firsts = FIRST_NAMES.get(nationality, FIRST_NAMES["USA"])
    lasts = LAST_NAMES.get(nationality, LAST_NAMES["USA"])
    return rng.choice(firsts), rng.choice(lasts)


def generate_unique_name(
    nationality: str,
    used_names: set[str],
    rng: Optional[random.Random] = None,
) -> tuple[str, str]:
    """
    Generate a name not already in used_names and record it there.

    After MAX_NAME_ATTEMPTS collisions a numeric suffix is appended to the
    last name until it is unique.
    """
    rng = rng or random.Random()
    for _ in range(MAX_NAME_ATTEMPTS):
        first, last = generate_name(nationality, rng)
        full = f"{first} {last}"
        if full not in used_names:
            used_names.add(full)
            return first, last

    suffix = 1
    while f"{first} {last} {suffix}" in used_names:
        suffix += 1
    last = f"{last} {suffix}"
    used_names.add(f"{first} {last}")
    return first, last
