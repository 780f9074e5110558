"""CineCircle social watchlist API."""
