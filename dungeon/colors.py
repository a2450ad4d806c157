# Type alias for RGB colors
Color = tuple[int, int, int]

# Tile colors, one per TileTypeID
WALL: Color = (24, 20, 37)
FLOOR: Color = (200, 180, 50)
CORRIDOR: Color = (130, 110, 50)
WALL_BORDER: Color = (90, 83, 110)
