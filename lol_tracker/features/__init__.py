"""Feature modules: assets, stats, matches, players, favorites."""
