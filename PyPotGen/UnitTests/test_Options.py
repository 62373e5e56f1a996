import json
import os
import tempfile
import unittest

from PyPotGen.Helpers.Settings import GetIntSetting, GetStringListSetting
from PyPotGen.Helpers.Tests import log_input_expected_result, log_test_name
from PyPotGen.Options import Options, default_settings
from PyPotGen.PotError import SettingsError

class TestOptions(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write_settings(self, content : str) -> str:
        path = os.path.join(self.temp_dir.name, 'settings.json')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_Defaults(self):
        log_test_name("Defaults")
        options = Options()
        self.assertEqual(options.GetSettings().keys(), default_settings.keys())
        self.assertEqual(options.max_threads, default_settings['max_threads'])
        self.assertTrue(all(extension.startswith('.') for extension in options.extensions))

    def test_Overrides(self):
        log_test_name("Overrides")
        options = Options({ 'max_threads': 2, 'domain': None }, extensions='PHP; inc', exclude_dirs=[], encoding=None)

        self.assertEqual(options.max_threads, 2)
        self.assertEqual(options.domain, default_settings['domain'])
        self.assertEqual(options.extensions, ['.php', '.inc'])
        self.assertEqual(options.exclude_dirs, [])
        self.assertEqual(options.encoding, default_settings['encoding'] or 'utf-8')

    def test_MaxThreads(self):
        log_test_name("MaxThreads")
        self.assertEqual(Options(max_threads='8').max_threads, 8)

        for value in [0, -1, True, 'many']:
            with self.subTest(value=value):
                with self.assertRaises(SettingsError):
                    _ = Options(max_threads=value).max_threads

    def test_DefaultsAreNotShared(self):
        options = Options()
        options['exclude_dirs'].append('dist')
        self.assertNotIn('dist', Options().exclude_dirs)

    def test_LoadSettings(self):
        log_test_name("LoadSettings")
        path = self._write_settings(json.dumps({ 'domain': 'my-plugin', 'max_threads': 2, 'exclude_dirs': 'vendor,build', 'unknown': 1 }))

        options = Options()
        self.assertTrue(options.LoadSettings(path))

        log_input_expected_result(path, 'my-plugin', options.domain)
        self.assertEqual(options.domain, 'my-plugin')
        self.assertEqual(options.max_threads, 2)
        self.assertEqual(options.exclude_dirs, ['vendor', 'build'])
        self.assertNotIn('unknown', options)

    def test_LoadSettingsMissingFile(self):
        options = Options()
        self.assertFalse(options.LoadSettings(os.path.join(self.temp_dir.name, 'missing.json')))

    def test_LoadSettingsInvalidFile(self):
        path = self._write_settings("{ not json")
        options = Options()
        with self.assertLogs(level='ERROR'):
            self.assertFalse(options.LoadSettings(path))

    def test_LoadSettingsNotAnObject(self):
        path = self._write_settings("[1, 2, 3]")
        with self.assertRaises(SettingsError):
            Options().LoadSettings(path)

class TestSettingsHelpers(unittest.TestCase):
    def test_GetIntSetting(self):
        log_test_name("GetIntSetting")
        cases = [
            ({ 'value': 3 }, 3),
            ({ 'value': '12' }, 12),
            ({ 'value': 2.9 }, 2),
            ({}, None),
        ]
        for settings, expected in cases:
            with self.subTest(settings=settings):
                result = GetIntSetting(settings, 'value')
                log_input_expected_result(settings, expected, result)
                self.assertEqual(result, expected)

        with self.assertRaises(SettingsError):
            GetIntSetting({ 'value': [1] }, 'value')

    def test_GetStringListSetting(self):
        log_test_name("GetStringListSetting")
        cases = [
            ({ 'value': 'a, b;c' }, ['a', 'b', 'c']),
            ({ 'value': ['a', ' b ', ''] }, ['a', 'b']),
            ({ 'value': '' }, []),
            ({}, []),
        ]
        for settings, expected in cases:
            with self.subTest(settings=settings):
                result = GetStringListSetting(settings, 'value')
                log_input_expected_result(settings, expected, result)
                self.assertEqual(result, expected)

        for value in [42, ['a', 1]]:
            with self.subTest(value=value):
                with self.assertRaises(SettingsError):
                    GetStringListSetting({ 'value': value }, 'value')

if __name__ == '__main__':
    unittest.main()
