"""
Asset URL builders and static ID tables.

Pure string templates parameterised by a resolved patch version or augment
table. Nothing in this module performs I/O.
"""

from typing import Mapping, Optional

from lol_tracker.core.config import get_global_settings

PERK_IMAGES_BASE = "https://ddragon.leagueoflegends.com/cdn/img/perk-images"
TIER_ICON_BASE = (
    "https://raw.communitydragon.org/latest/plugins/rcp-fe-lol-static-assets"
    "/global/default/images/ranked-mini-crests"
)
AUGMENT_ASSET_PREFIX = "/lol-game-data/assets/"
DEFAULT_SPELL = "SummonerFlash"

# Keystone rune ID -> icon path
KEYSTONE_ICONS: Mapping[int, str] = {
    # Precision
    8005: "Styles/Precision/PressTheAttack/PressTheAttack.png",
    8008: "Styles/Precision/LethalTempo/LethalTempoTemp.png",
    8021: "Styles/Precision/FleetFootwork/FleetFootwork.png",
    8010: "Styles/Precision/Conqueror/Conqueror.png",
    # Domination
    8112: "Styles/Domination/Electrocute/Electrocute.png",
    8124: "Styles/Domination/Predator/Predator.png",
    8128: "Styles/Domination/DarkHarvest/DarkHarvest.png",
    9923: "Styles/Domination/HailOfBlades/HailOfBlades.png",
    # Sorcery
    8214: "Styles/Sorcery/SummonAery/SummonAery.png",
    8229: "Styles/Sorcery/ArcaneComet/ArcaneComet.png",
    8230: "Styles/Sorcery/PhaseRush/PhaseRush.png",
    # Resolve
    8437: "Styles/Resolve/GraspOfTheUndying/GraspOfTheUndying.png",
    8439: "Styles/Resolve/VeteranAftershock/VeteranAftershock.png",
    8465: "Styles/Resolve/Guardian/Guardian.png",
    # Inspiration
    8351: "Styles/Inspiration/GlacialAugment/GlacialAugment.png",
    8360: "Styles/Inspiration/UnsealedSpellbook/UnsealedSpellbook.png",
    8369: "Styles/Inspiration/FirstStrike/FirstStrike.png",
}

# Secondary rune style ID -> icon filename
RUNE_STYLE_ICONS: Mapping[int, str] = {
    8000: "7201_Precision.png",
    8100: "7200_Domination.png",
    8200: "7202_Sorcery.png",
    8300: "7203_Whimsy.png",
    8400: "7204_Resolve.png",
}

# Summoner spell ID -> internal name
SUMMONER_SPELLS: Mapping[int, str] = {
    1: "SummonerBoost",
    3: "SummonerExhaust",
    4: "SummonerFlash",
    6: "SummonerHaste",
    7: "SummonerHeal",
    11: "SummonerSmite",
    12: "SummonerTeleport",
    13: "SummonerMana",
    14: "SummonerDot",
    21: "SummonerBarrier",
    32: "SummonerSnowball",
}


def ddragon_image_base(version: str, cdn_url: Optional[str] = None) -> str:
    """Versioned image root, e.g. ``.../cdn/15.3.1/img``."""
    cdn = cdn_url or get_global_settings().ddragon_cdn_url
    return f"{cdn}/{version}/img"


def champion_icon_url(name: str, base: str) -> str:
    return f"{base}/champion/{name}.png"


def item_icon_url(item_id: int, base: str) -> str:
    """Item icon; empty slots (ID 0) have no icon."""
    if not item_id:
        return ""
    return f"{base}/item/{item_id}.png"


def spell_icon_url(spell_id: int, base: str) -> str:
    name = SUMMONER_SPELLS.get(spell_id, DEFAULT_SPELL)
    return f"{base}/spell/{name}.png"


def profile_icon_url(icon_id: Optional[int], base: str) -> str:
    if icon_id is None:
        return ""
    return f"{base}/profileicon/{icon_id}.png"


def keystone_icon_url(rune_id: int) -> str:
    path = KEYSTONE_ICONS.get(rune_id)
    if not path:
        return ""
    return f"{PERK_IMAGES_BASE}/{path}"


def rune_style_icon_url(style_id: int) -> str:
    filename = RUNE_STYLE_ICONS.get(style_id)
    if not filename:
        return ""
    return f"{PERK_IMAGES_BASE}/Styles/{filename}"


def tier_icon_url(tier: Optional[str]) -> str:
    """Ranked mini-crest for a tier; ``unranked`` when there is none."""
    return f"{TIER_ICON_BASE}/{(tier or 'unranked').lower()}.png"


def augment_icon_url(augment_id: int, table: Mapping[int, str]) -> Optional[str]:
    """Augment icon from a resolved table; None means the icon is unavailable."""
    return table.get(augment_id)


def augment_cdn_url(icon_path: str, base_url: Optional[str] = None) -> str:
    """
    Rewrite an augment metadata icon path into a Community Dragon URL.

    The metadata stores game-client paths such as
    ``/lol-game-data/assets/ASSETS/UX/Cherry/Augments/Icons/Foo_small.png``;
    the CDN serves them lowercased and without the asset prefix.
    """
    base = base_url or get_global_settings().community_dragon_base_url
    cdn_path = icon_path.lower().replace(AUGMENT_ASSET_PREFIX, "")
    return f"{base}/{cdn_path}"
