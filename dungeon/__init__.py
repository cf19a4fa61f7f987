"""Turn-based dungeon crawl: procedural rooms, field of view and melee monsters."""
