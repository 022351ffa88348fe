"""Wallpaper matcher - keyword scoring against a curated background catalog."""

import random
from dataclasses import dataclass

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=2400&q=80"


def _urls(*photo_ids: str) -> tuple[str, ...]:
    return tuple(_UNSPLASH.format(pid) for pid in photo_ids)


@dataclass(frozen=True)
class WallpaperEntry:
    """One catalog category: keywords that select it and the images it offers."""

    name: str
    keywords: tuple[str, ...]
    urls: tuple[str, ...]


WALLPAPER_CATALOG: tuple[WallpaperEntry, ...] = (
    WallpaperEntry(
        name="wedding",
        keywords=("wedding", "bride", "romance", "love", "engagement", "couple", "marriage"),
        urls=_urls("1519741497674-611481863552", "1511285560929-80b456fea0bc", "1465495976277-4387d4b0b4c6"),
    ),
    WallpaperEntry(
        name="photography",
        keywords=("photo", "photography", "photographer", "camera", "lens", "portrait", "studio"),
        urls=_urls("1452587925148-ce544e77e70d", "1516035069371-29a1b244cc32", "1502920917128-1aa500764cbd"),
    ),
    WallpaperEntry(
        name="food",
        keywords=(
            "food", "bakery", "baker", "bread", "pastry", "cafe", "coffee",
            "chef", "restaurant", "cooking", "kitchen", "cake", "baking",
        ),
        urls=_urls("1509440159596-0249088772ff", "1517248135467-4c7edcad34c4", "1495474472287-4d71bcdd2085"),
    ),
    WallpaperEntry(
        name="tech",
        keywords=("code", "developer", "software", "programming", "tech", "engineer", "computer", "startup"),
        urls=_urls("1498050108023-c5249f4df085", "1461749280684-dccba630e2f6", "1518770660439-4636190af475"),
    ),
    WallpaperEntry(
        name="design",
        keywords=("design", "designer", "art", "artist", "illustration", "creative", "paint", "gallery", "brand"),
        urls=_urls("1513475382585-d06e58bcb0e0", "1541961017774-22349e4a1262", "1558655146-9f40138edfeb"),
    ),
    WallpaperEntry(
        name="nature",
        keywords=("nature", "forest", "mountain", "hiking", "outdoor", "travel", "adventure", "landscape"),
        urls=_urls("1506905925346-21bda4d32df4", "1441974231531-c6227db76b6e", "1470071459604-3b5ec3a7fe05"),
    ),
    WallpaperEntry(
        name="ocean",
        keywords=("ocean", "beach", "sea", "surf", "coast", "wave", "island", "tropical"),
        urls=_urls("1507525428034-b723cf961d3e", "1505142468610-359e7d316be0", "1519046904884-53103b34b206"),
    ),
    WallpaperEntry(
        name="music",
        keywords=("music", "musician", "song", "band", "guitar", "piano", "producer", "audio", "podcast"),
        urls=_urls("1511671782779-c97d3d27a1d4", "1493225457124-a3eb161ffa5f", "1514320291840-2e0a9bf2a9ae"),
    ),
    WallpaperEntry(
        name="wellness",
        keywords=("fitness", "gym", "yoga", "wellness", "health", "coach", "training", "meditation", "calm"),
        urls=_urls("1517836357463-d25dfeac3438", "1544367567-0f2fcb009e0b", "1506126613408-eca07ce68773"),
    ),
    WallpaperEntry(
        name="writing",
        keywords=(
            "writer", "writing", "author", "book", "study", "learn",
            "student", "teacher", "education", "library", "reading",
        ),
        urls=_urls("1434030216411-0b793f4b4173", "1481627834876-b7833e8f5570", "1503676260728-1c00da094a0b"),
    ),
    WallpaperEntry(
        name="business",
        keywords=("business", "office", "consulting", "consultant", "finance", "corporate", "marketing", "agency", "city"),
        urls=_urls("1497366216548-37526070297c", "1486406146926-c627a92ad1ab", "1477959858617-67f85cf4f1df"),
    ),
    WallpaperEntry(
        name="fashion",
        keywords=("fashion", "style", "beauty", "makeup", "model", "clothing", "boutique"),
        urls=_urls("1445205170230-053b83016050", "1490481651871-ab68de25d43d", "1483985988355-763728e1935b"),
    ),
)

GENERIC_WALLPAPERS: tuple[str, ...] = _urls(
    "1557682250-33bd709cbe85",
    "1579546929518-9e396f3cc809",
    "1557683316-973673baf926",
)


def score_entry(phrase: str, words: list[str], entry: WallpaperEntry) -> int:
    """+2 if the phrase contains any catalog keyword, +1 per overlapping keyword/word pair."""
    score = 2 if any(k in phrase for k in entry.keywords) else 0
    for keyword in entry.keywords:
        for word in words:
            if keyword in word or word in keyword:
                score += 1
    return score


class WallpaperMatcher:
    """Pick a background image for a short keyword.

    Scoring is deterministic; the final pick is random within the best-scoring
    pool, so callers can only rely on which pool the URL comes from.
    """

    def __init__(
        self,
        catalog: tuple[WallpaperEntry, ...] = WALLPAPER_CATALOG,
        generic: tuple[str, ...] = GENERIC_WALLPAPERS,
        rng: random.Random | None = None,
    ) -> None:
        self._catalog = catalog
        self._generic = generic
        self._rng = rng or random.Random()

    def candidates(self, keyword: str) -> tuple[str, ...]:
        """Candidate pool for a keyword. Ties extend the pool instead of replacing it."""
        phrase = (keyword or "").lower().strip()
        words = [w for w in phrase.split() if len(w) > 2]
        best = 0
        pool: list[str] = []
        for entry in self._catalog:
            score = score_entry(phrase, words, entry)
            if score > best:
                best = score
                pool = list(entry.urls)
            elif score == best and best > 0:
                pool.extend(entry.urls)
        return tuple(pool) if best > 0 else self._generic

    def match(self, keyword: str) -> str:
        """Random URL from the candidate pool."""
        return self._rng.choice(self.candidates(keyword))
