from collections.abc import Iterator
from contextlib import contextmanager

from pitch_analytics.config import FeedSettings, load_feed_settings
from pitch_analytics.ingest.protocols import PitchFeedSource
from pitch_analytics.ingest.savant_source import SavantSource


@contextmanager
def build_feed_source(settings: FeedSettings | None = None) -> Iterator[PitchFeedSource]:
    """Composition root for commands: yields a configured Savant source and closes its client."""
    source = SavantSource.from_settings(settings or load_feed_settings())
    try:
        yield source
    finally:
        source.close()
