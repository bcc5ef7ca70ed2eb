"""Domain layer: entities, validation and page controllers for SchoolDir."""
