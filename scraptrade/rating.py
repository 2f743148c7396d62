# scraptrade/rating.py
"""Engagement based star rating for listings.

The score blends a logarithmic popularity signal (views) with the
click-through rate (contact reveals per view). Both halves saturate at 5 and
the average is cut into integer bands. Nothing here is stored; callers
recompute it on every read.
"""
import math

MAX_STARS = 5

# (lower bound of total score, stars), checked top-down
_BANDS = ((4.5, 5), (3.5, 4), (2.5, 3), (1.5, 2))


def rating_score(views: int, clicks: int) -> float:
    """Unbanded score in [0, 5]; 0.0 when there are no views."""
    if views == 0:
        return 0.0
    engagement_rate = clicks / views
    base_score = min(math.log10(views + 1), MAX_STARS)
    engagement_score = min(engagement_rate * 10, MAX_STARS)
    return (base_score + engagement_score) / 2


def rating(views: int, clicks: int) -> int:
    if views == 0:
        return 1
    total = rating_score(views, clicks)
    for threshold, stars in _BANDS:
        if total >= threshold:
            return stars
    return 1


def rating_stars(views: int, clicks: int) -> str:
    filled = rating(views, clicks)
    return "★" * filled + "☆" * (MAX_STARS - filled)
