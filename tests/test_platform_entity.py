import dataclasses
import unittest


class TestPlatformEntity(unittest.TestCase):
    def test_accessors_and_tags_frozen_to_tuple(self):
        from device_platforms import Platform

        p = Platform(id=1, name='x', tags=['x', 'wifi'])
        self.assertEqual(p.id, 1)
        self.assertEqual(p.name, 'x')
        self.assertEqual(p.tags, ('x', 'wifi'))

    def test_is_immutable(self):
        from device_platforms import Platform

        p = Platform(id=1, name='x', tags=['x'])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.name = 'y'

    def test_value_semantics(self):
        from device_platforms import Platform

        a = Platform.from_dict({'id': 6, 'name': 'photon', 'tags': ['photon', 'gen2', 'wifi', 'tcp']})
        b = Platform(6, 'photon', ('photon', 'gen2', 'wifi', 'tcp'))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_has_checks_own_tags(self):
        from device_platforms import platform_for_name

        argon = platform_for_name('argon')
        self.assertTrue(argon.has('wifi'))
        self.assertTrue(argon.has('mesh'))
        self.assertFalse(argon.has('cellular'))
        self.assertFalse(argon.has('gen2'))

    def test_is_alias(self):
        from device_platforms import platform_for_name

        boron = platform_for_name('boron')
        self.assertTrue(boron.is_('cellular'))
        self.assertFalse(boron.is_('wifi'))

    def test_has_rejects_tag_unknown_to_registry(self):
        from device_platforms import Platform, UnknownPlatformTagError

        p = Platform(id=1, name='x', tags=['x'])
        with self.assertRaises(UnknownPlatformTagError) as cm:
            p.has('bogus')
        self.assertEqual(cm.exception.key, 'bogus')
        self.assertIn('Unknown platform tag: bogus', str(cm.exception))

    def test_has_rejects_own_tag_when_registry_does_not_know_it(self):
        from device_platforms import Platform, UnknownPlatformTagError

        # 'x' is on this instance but no registered platform carries it
        p = Platform(id=1, name='x', tags=['x'])
        with self.assertRaises(UnknownPlatformTagError):
            p.is_('x')

    def test_unregistered_platform_can_test_known_tags(self):
        from device_platforms import Platform

        p = Platform(id=1, name='x', tags=['x', 'ble'])
        self.assertTrue(p.has('ble'))
        self.assertFalse(p.has('wifi'))

    def test_to_dict(self):
        from device_platforms import platform_for_id

        self.assertEqual(
            platform_for_id(10).to_dict(),
            {'id': 10, 'name': 'electron', 'tags': ['electron', 'gen2', 'cellular', 'udp']},
        )


if __name__ == "__main__":
    unittest.main()
