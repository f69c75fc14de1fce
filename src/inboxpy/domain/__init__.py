"""Domain layer: categories, batch orchestration and reconciliation."""
