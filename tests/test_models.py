import unittest

from simparams.domain.models import CardinalDirection, LightStatus, TurnDirection

class TestDirectionEnums(unittest.TestCase):
    def test_members(self):
        self.assertEqual([d.name for d in CardinalDirection], ["NORTH", "EAST", "SOUTH", "WEST"])
        self.assertEqual([t.name for t in TurnDirection], ["LEFT", "RIGHT", "STRAIGHT", "U_TURN"])
        self.assertEqual([s.name for s in LightStatus], ["GREEN", "YELLOW", "RED"])

    def test_lookup_by_value(self):
        self.assertIs(LightStatus("RED"), LightStatus.RED)
        self.assertEqual(TurnDirection.U_TURN, "U_TURN")
        with self.assertRaises(ValueError):
            CardinalDirection("UP")

    def test_domains_are_distinct(self):
        self.assertNotEqual(CardinalDirection.NORTH, LightStatus.GREEN)

if __name__ == '__main__':
    unittest.main()
