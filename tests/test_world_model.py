import copy
import unittest

from dungeon.game.data import WORLD_DATA
from dungeon.game.loader import WorldValidationError, load_world, validate_world
from dungeon.game.models import Direction, ItemId, RoomId
from dungeon.game.world import IN_INVENTORY, NOWHERE, InRoom, WorldState


class WorldStateTests(unittest.TestCase):
    def setUp(self):
        self.state = WorldState(load_world())

    def test_initial_locations(self):
        self.assertEqual(self.state.current_room().room_id, RoomId.CELL)
        self.assertEqual(self.state.item_location(ItemId.STONE), InRoom(RoomId.CELL))
        self.assertEqual(self.state.item_location(ItemId.SWORD), InRoom(RoomId.ARMORY))
        self.assertIs(self.state.item_location(ItemId.KEY), NOWHERE)

    def test_reveal_item_only_once(self):
        self.assertTrue(self.state.reveal_item(RoomId.CELL, ItemId.KEY))
        self.assertFalse(self.state.reveal_item(RoomId.CELL, ItemId.KEY))
        self.assertFalse(self.state.reveal_item(RoomId.HALLWAY, ItemId.KEY))
        self.assertFalse(self.state.reveal_item(RoomId.CELL, ItemId.SWORD))
        self.assertEqual(self.state.rooms[RoomId.CELL].items, [ItemId.STONE, ItemId.KEY])
        self.assertEqual(self.state.rooms[RoomId.HALLWAY].items, [])

    def test_take_item_keeps_order(self):
        self.state.reveal_item(RoomId.CELL, ItemId.KEY)
        self.state.take_item(ItemId.SWORD)
        self.state.take_item(ItemId.KEY)
        self.assertEqual(self.state.player.inventory, [ItemId.SWORD, ItemId.KEY])
        self.assertIs(self.state.item_location(ItemId.KEY), IN_INVENTORY)
        self.assertNotIn(ItemId.SWORD, self.state.rooms[RoomId.ARMORY].items)

        # already held: nothing moves
        self.state.take_item(ItemId.KEY)
        self.assertEqual(self.state.player.inventory, [ItemId.SWORD, ItemId.KEY])

    def test_unblock_exit_is_permanent(self):
        self.state.unblock_exit(RoomId.HALLWAY, Direction.EAST)
        self.state.unblock_exit(RoomId.HALLWAY, Direction.EAST)
        self.assertEqual(self.state.rooms[RoomId.HALLWAY].blocked_exits, {})
        self.assertEqual(self.state.rooms[RoomId.HALLWAY].exits[Direction.EAST], RoomId.ARMORY)

    def test_sessions_do_not_share_rooms(self):
        other = WorldState(self.state.world)
        self.state.unblock_exit(RoomId.CELL, Direction.NORTH)
        self.state.take_item(ItemId.STONE)
        self.assertIn(Direction.NORTH, other.rooms[RoomId.CELL].blocked_exits)
        self.assertIn(ItemId.STONE, other.rooms[RoomId.CELL].items)
        self.assertIn(Direction.NORTH, self.state.world.rooms[RoomId.CELL].blocked_exits)

    def test_move_to(self):
        self.state.move_to(RoomId.ARMORY)
        self.assertEqual(self.state.current_room().name, "Dusty Armory")


class WorldValidationTests(unittest.TestCase):
    def bad(self):
        return copy.deepcopy(WORLD_DATA)

    def test_shipped_world_is_valid(self):
        validate_world(WORLD_DATA)
        world = load_world()
        self.assertEqual(world.start_room, RoomId.CELL)
        self.assertIsNotNone(world.items[ItemId.STONE].on_examine)
        self.assertFalse(world.items[ItemId.STONE].takeable)
        self.assertEqual(len(world.use_rules), 2)

    def test_validation_errors(self):
        # start_room missing
        bad = self.bad()
        bad["start_room"] = "nope"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # bad exit
        bad = self.bad()
        bad["rooms"]["cell"]["exits"]["south"] = "nope"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # bad direction
        bad = self.bad()
        bad["rooms"]["cell"]["exits"]["up"] = "hallway"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # blocked exit without an exit
        bad = self.bad()
        bad["rooms"]["armory"]["blocked_exits"]["north"] = "A wall."
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # unknown room item
        bad = self.bad()
        bad["rooms"]["hallway"]["items"].append("lamp")
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # item placed twice
        bad = self.bad()
        bad["rooms"]["hallway"]["items"].append("sword")
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # reveal into unknown room
        bad = self.bad()
        bad["items"]["stone"]["on_examine"]["room"] = "attic"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # unknown effect type
        bad = self.bad()
        bad["items"]["stone"]["on_examine"]["type"] = "explode"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # use rule unblocking a non-exit
        bad = self.bad()
        bad["use_rules"][0]["unblock"]["direction"] = "west"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

        # use rule in unknown room
        bad = self.bad()
        bad["use_rules"][1]["room"] = "tower"
        with self.assertRaises(WorldValidationError):
            validate_world(bad)

    def test_validation_error_is_value_error(self):
        bad = self.bad()
        bad["rooms"]["dungeon"] = {}
        with self.assertRaises(ValueError):
            load_world(bad)


if __name__ == "__main__":
    unittest.main()
