"""First-person raycasting renderer over a tile map, with a top-down minimap."""
