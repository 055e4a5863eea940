"""British to American spelling translation."""

import re
from typing import Dict

# Lexicon terms use American spelling
GB_TO_US: Dict[str, str] = {
    "aeroplane": "airplane",
    "aeroplanes": "airplanes",
    "aluminium": "aluminum",
    "analyse": "analyze",
    "analysed": "analyzed",
    "analyses": "analyzes",
    "analysing": "analyzing",
    "apologise": "apologize",
    "apologised": "apologized",
    "apologising": "apologizing",
    "armour": "armor",
    "behaviour": "behavior",
    "behaviours": "behaviors",
    "catalogue": "catalog",
    "centre": "center",
    "centres": "centers",
    "cheque": "check",
    "colour": "color",
    "colourful": "colorful",
    "colours": "colors",
    "cosy": "cozy",
    "defence": "defense",
    "dialogue": "dialog",
    "enrol": "enroll",
    "favour": "favor",
    "favourite": "favorite",
    "favourites": "favorites",
    "fibre": "fiber",
    "flavour": "flavor",
    "flavours": "flavors",
    "grey": "gray",
    "harbour": "harbor",
    "honour": "honor",
    "honoured": "honored",
    "humour": "humor",
    "jewellery": "jewelry",
    "labour": "labor",
    "licence": "license",
    "litre": "liter",
    "manoeuvre": "maneuver",
    "metre": "meter",
    "metres": "meters",
    "mum": "mom",
    "neighbour": "neighbor",
    "neighbours": "neighbors",
    "offence": "offense",
    "organisation": "organization",
    "organisations": "organizations",
    "organise": "organize",
    "organised": "organized",
    "organising": "organizing",
    "paralyse": "paralyze",
    "programme": "program",
    "programmes": "programs",
    "practise": "practice",
    "realise": "realize",
    "realised": "realized",
    "realising": "realizing",
    "recognise": "recognize",
    "recognised": "recognized",
    "rumour": "rumor",
    "savour": "savor",
    "sceptical": "skeptical",
    "socialise": "socialize",
    "socialising": "socializing",
    "theatre": "theater",
    "theatres": "theaters",
    "travelled": "traveled",
    "travelling": "traveling",
    "tyre": "tire",
    "tyres": "tires",
    "valour": "valor",
    "vigour": "vigor",
    "whilst": "while",
}

_GB_PATTERN = re.compile(
    r"\b(" + "|".join(sorted(map(re.escape, GB_TO_US), key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def translate_gb_to_us(text: str) -> str:
    """Replace British spellings with American ones, word by word."""
    if not text:
        return text
    return _GB_PATTERN.sub(lambda m: GB_TO_US[m.group(0).lower()], text)
