from typing import Tuple

from .models import Verb

SEED_VERBS: Tuple[Verb, ...] = (
    Verb(in_spanish="comer", in_english="to eat"),
    Verb(in_spanish="hacer", in_english="to do, to make"),
    Verb(in_spanish="aprender", in_english="to learn"),
)
