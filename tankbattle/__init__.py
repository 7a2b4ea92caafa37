"""Two-player tank battle game with destructible walls, bases and health packs."""

__version__ = "0.1.0"
__all__ = ["bullet", "tank", "game_map", "game", "app"]