"""Live NS departures and arrivals, enriched with train compositions and disruptions."""

__version__ = "0.1.0"
