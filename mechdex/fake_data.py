"""
Sample data for demos and seeding the store.
"""

from __future__ import annotations

import random
from typing import Optional

from mechdex.models import KeySwitch

TONES = ("Quiet", "Silent", "Creamy", "Clacky", "Smooth", "Thocky", "Crisp", "Muted")
ANIMALS = ("Red", "Panda", "Otter", "Falcon", "Fox", "Lynx", "Heron", "Badger")
SWITCH_TYPES = ("Linear Switch", "Tactile Switch", "Clicky Switch")
COMPANIES = ("Cherry", "Gateron", "Kailh", "Akko", "Outemu", "TTC", "JWK", "Durock")
ACTUATION_FORCES = ("35g", "45g", "50g", "55g", "62g", "67g")
TRAVELS = ("2.0mm", "2.2mm", "3.4mm", "3.6mm", "4.0mm")


def fill_key_switch(
    key_switch: KeySwitch, rng: Optional[random.Random] = None
) -> KeySwitch:
    """Overwrite the descriptive fields of `key_switch` in place. The id is kept."""
    rng = rng or random.Random()
    key_switch.switch_name = f"{rng.choice(TONES)} {rng.choice(ANIMALS)}"
    key_switch.switch_type = rng.choice(SWITCH_TYPES)
    key_switch.company = rng.choice(COMPANIES)
    key_switch.actuation_force = rng.choice(ACTUATION_FORCES)
    key_switch.switch_travel = rng.choice(TRAVELS)
    return key_switch


def fake_key_switch(rng: Optional[random.Random] = None) -> KeySwitch:
    return fill_key_switch(KeySwitch(), rng)
