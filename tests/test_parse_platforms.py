import unittest


def _names(platforms):
    return [p.name for p in platforms]


class TestParseOne(unittest.TestCase):
    def test_all_and_negated_all(self):
        from device_platforms import PLATFORMS, parse_one

        self.assertEqual(list(parse_one('all')), list(PLATFORMS))
        self.assertEqual(list(parse_one('!all')), [])

    def test_tag(self):
        from device_platforms import parse_one

        self.assertEqual(_names(parse_one('cellular')), ['electron', 'boron', 'bsom'])

    def test_negated_tag_is_complement_over_registry(self):
        from device_platforms import parse_one

        self.assertEqual(
            _names(parse_one('!photon')),
            ['p1', 'electron', 'argon', 'boron', 'xenon', 'asom', 'bsom', 'xsom'],
        )

    def test_unknown_tag_raises(self):
        from device_platforms import parse_one, UnknownPlatformTagError

        with self.assertRaises(UnknownPlatformTagError):
            parse_one('bogus')
        with self.assertRaises(UnknownPlatformTagError):
            parse_one('!bogus')


class TestParsePlatforms(unittest.TestCase):
    def test_all(self):
        from device_platforms import PLATFORMS, parse_platforms

        result = parse_platforms(['all'])
        self.assertEqual(len(result), 9)
        for a, b in zip(result, PLATFORMS):
            self.assertIs(a, b)

    def test_negated_all_is_empty(self):
        from device_platforms import parse_platforms

        self.assertEqual(parse_platforms(['!all']), [])

    def test_tokens_in_one_expression_are_intersected(self):
        from device_platforms import parse_platforms

        self.assertEqual(_names(parse_platforms(['wifi gen3'])), ['argon', 'asom'])

    def test_runs_of_whitespace_separate_tokens(self):
        from device_platforms import parse_platforms

        self.assertEqual(_names(parse_platforms(['wifi \t  gen3'])), ['argon', 'asom'])

    def test_leading_or_trailing_whitespace_is_an_empty_tag(self):
        from device_platforms import parse_platforms, UnknownPlatformTagError

        for expression in (' wifi', 'wifi ', '\twifi gen3\n'):
            with self.assertRaises(UnknownPlatformTagError) as cm:
                parse_platforms([expression])
            self.assertEqual(cm.exception.key, '')

    def test_expressions_are_unioned_in_first_seen_order(self):
        from device_platforms import parse_platforms

        self.assertEqual(
            _names(parse_platforms(['wifi', 'cellular'])),
            ['photon', 'p1', 'argon', 'asom', 'electron', 'boron', 'bsom'],
        )

    def test_union_deduplicates(self):
        from device_platforms import parse_platforms

        self.assertEqual(
            _names(parse_platforms(['cellular', 'gen3 cellular', 'boron'])),
            ['electron', 'boron', 'bsom'],
        )

    def test_union_keeps_first_seen_not_registry_order(self):
        from device_platforms import parse_platforms

        self.assertEqual(_names(parse_platforms(['xsom', 'photon'])), ['xsom', 'photon'])

    def test_negated_mesh(self):
        from device_platforms import parse_platforms

        self.assertEqual(_names(parse_platforms(['!mesh'])), ['photon', 'p1', 'electron'])

    def test_negation_inside_expression(self):
        from device_platforms import parse_platforms

        self.assertEqual(_names(parse_platforms(['gen3 !mesh'])), [])
        self.assertEqual(_names(parse_platforms(['all !photon udp'])), [
            'electron', 'argon', 'boron', 'xenon', 'asom', 'bsom', 'xsom',
        ])
        self.assertEqual(_names(parse_platforms(['wifi !all'])), [])

    def test_wifi_gen3_or_cellular(self):
        from device_platforms import parse_platforms

        self.assertEqual(
            _names(parse_platforms(['wifi gen3', 'cellular'])),
            ['argon', 'asom', 'electron', 'boron', 'bsom'],
        )

    def test_empty_query(self):
        from device_platforms import parse_platforms

        self.assertEqual(parse_platforms([]), [])

    def test_unknown_tag_raises(self):
        from device_platforms import parse_platforms, UnknownPlatformTagError

        with self.assertRaises(UnknownPlatformTagError):
            parse_platforms(['wifi', 'gen4'])
        with self.assertRaises(UnknownPlatformTagError):
            parse_platforms(['wifi wfi'])

    def test_blank_expression_raises(self):
        from device_platforms import parse_platforms, UnknownPlatformTagError

        with self.assertRaises(UnknownPlatformTagError) as cm:
            parse_platforms(['   '])
        self.assertEqual(cm.exception.key, '')


if __name__ == "__main__":
    unittest.main()
