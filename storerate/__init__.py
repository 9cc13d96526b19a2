"""StoreRate: store rating service (users, stores, 1-5 star ratings, dashboards)."""

__version__ = "0.1.0"
