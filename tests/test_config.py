from cubkit.config import (
    Config,
    Coord,
    GameMap,
    ParseState,
    Player,
    Textures,
)


def test_parse_state_values():
    assert ParseState.FAILURE == -1
    assert ParseState.SUCCESS == 0
    assert ParseState(-1) is ParseState.FAILURE


def test_map_dimensions_follow_grid():
    rows = ["111", "10N01", "1"]
    game_map = GameMap(grid=rows)
    assert game_map.height == len(rows)
    assert game_map.width == len("10N01")


def test_empty_map_has_zero_size():
    game_map = GameMap()
    assert game_map.width == 0
    assert game_map.height == 0


def test_map_dimensions_update_with_grid():
    game_map = GameMap(grid=["11"])
    game_map.grid.append("1111")
    assert game_map.height == 2
    assert game_map.width == 4


def test_config_defaults_are_independent():
    first = Config()
    second = Config()
    first.map.grid.append("1")
    first.textures.north = "north.xpm"
    assert second.map.grid == []
    assert second.textures.north is None


def test_config_holds_given_parts():
    textures = Textures(north="n.xpm", south="s.xpm", east="e.xpm", west="w.xpm")
    player = Player(pos=Coord(3, 4), dir="N")
    cfg = Config(textures=textures, floor_color=0x00FF00, ceiling_color=0x0000FF,
                 map=GameMap(grid=["1N1"]), player=player)
    assert cfg.textures.west == "w.xpm"
    assert cfg.player.pos == Coord(x=3, y=4)
    assert cfg.player.dir == "N"
    assert cfg.floor_color == 0x00FF00
    assert cfg.map.width == 3