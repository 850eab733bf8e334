"""Activity Board API: activities, participants and the links between them."""
