"""HTTP adapter over the league core."""
