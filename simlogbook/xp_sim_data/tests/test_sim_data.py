# simlogbook/xp_sim_data/tests/test_sim_data.py

import unittest

from simlogbook.xp_sim_data import SimData, MalformedRecord


def make_record(**overrides) -> SimData:
    fields = dict(
        icao="C172",
        name="Cessna Skyhawk",
        registration="5B-CAS",
        latitude=34.717778,
        longitude=32.485556,
        engine_on=True,
        on_ground=False,
    )
    fields.update(overrides)
    return SimData(**fields)


class TestSimDataDecode(unittest.TestCase):

    def test_decode(self):
        record = SimData.from_csv("B738,Boeing 737-800,SX-DGA,35.339722,25.180278,false,true")
        self.assertEqual("B738", record.icao)
        self.assertEqual("Boeing 737-800", record.name)
        self.assertEqual("SX-DGA", record.registration)
        self.assertEqual(35.339722, record.latitude)
        self.assertEqual(25.180278, record.longitude)
        self.assertFalse(record.engine_on)
        self.assertTrue(record.on_ground)

    def test_too_few_fields(self):
        with self.assertRaises(MalformedRecord):
            SimData.from_csv("B738,Boeing 737-800,SX-DGA,35.3,25.1,false")

    def test_empty_input(self):
        with self.assertRaises(MalformedRecord):
            SimData.from_csv("")

    def test_bad_coordinate(self):
        with self.assertRaises(MalformedRecord) as ctx:
            SimData.from_csv("B738,Boeing,SX-DGA,north,25.1,false,true")
        self.assertIn("north", str(ctx.exception))

    def test_bad_boolean(self):
        with self.assertRaises(MalformedRecord):
            SimData.from_csv("B738,Boeing,SX-DGA,35.3,25.1,1,true")
        with self.assertRaises(MalformedRecord):
            SimData.from_csv("B738,Boeing,SX-DGA,35.3,25.1,false,True")

    def test_extra_fields_are_ignored(self):
        record = SimData.from_csv("B738,Boeing,SX-DGA,35.3,25.1,false,true,extra")
        self.assertEqual(make_record(icao="B738", name="Boeing", registration="SX-DGA",
                                     latitude=35.3, longitude=25.1, engine_on=False, on_ground=True), record)


class TestSimDataEncode(unittest.TestCase):

    def test_encode(self):
        record = make_record(latitude=34.5, longitude=-32.25, engine_on=False, on_ground=True)
        self.assertEqual("C172,Cessna Skyhawk,5B-CAS,34.5,-32.25,false,true", record.to_csv())

    def test_round_trip(self):
        for record in (
            make_record(),
            make_record(latitude=-0.1 + 0.2, longitude=179.99999999999997),
            make_record(registration="", engine_on=False, on_ground=True),
        ):
            self.assertEqual(record, SimData.from_csv(record.to_csv()))


if __name__ == '__main__':
    unittest.main()
