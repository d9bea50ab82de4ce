import random

from domain.models.quote import Quote

QUOTES: tuple[Quote, ...] = (
    Quote("The best way to get started is to quit talking and begin doing.", "Walt Disney"),
    Quote(
        "The pessimist sees difficulty in every opportunity. "
        "The optimist sees opportunity in every difficulty.",
        "Winston Churchill",
    ),
    Quote("Don’t let yesterday take up too much of today.", "Will Rogers"),
    Quote(
        "You learn more from failure than from success. "
        "Don’t let it stop you. Failure builds character.",
        "Unknown",
    ),
    Quote("It’s not whether you get knocked down, it’s whether you get up.", "Vince Lombardi"),
)


class QuoteService:
    def __init__(self, quotes: tuple[Quote, ...] = QUOTES, rng: random.Random | None = None):
        self.quotes = quotes
        self._rng = rng or random.Random()

    def random_quote(self) -> Quote:
        return self._rng.choice(self.quotes)
