import hashlib
import hmac
import re
import unittest
from unittest import mock

from md5digest import api
from md5digest.api import MD5Hasher
from md5digest.config import ENV_B64PAD, ENV_ENCODING, ENV_HEXCASE, HashConfig
from md5digest.errors import ErrorKind, InvalidArgumentError, InvalidConfigurationError


def _ref_hmac_hex(key: str, data: str) -> str:
    return hmac.new(key.encode("utf-8"), data.encode("utf-8"), hashlib.md5).hexdigest()


class TestDigestOperations(unittest.TestCase):
    def test_hex(self) -> None:
        self.assertEqual(api.hex_md5(""), "d41d8cd98f00b204e9800998ecf8427e")
        self.assertEqual(api.hex_md5("abc"), "900150983cd24fb0d6963f7d28e17f72")
        self.assertEqual(api.hex_md5("naïve ☃"), hashlib.md5("naïve ☃".encode("utf-8")).hexdigest())

    def test_hex_shape(self) -> None:
        upper = HashConfig(hex_uppercase=True)
        for s in ["", "a", "The quick brown fox", "x" * 1000]:
            self.assertRegex(api.hex_md5(s), r"^[0-9a-f]{32}$")
            self.assertRegex(api.hex_md5(s, upper), r"^[0-9A-F]{32}$")

    def test_b64_and_any(self) -> None:
        self.assertEqual(api.b64_md5(""), "1B2M2Y8AsgTpgAmY7PhCfg")
        self.assertEqual(api.b64_md5("", HashConfig(b64_pad="=")), "1B2M2Y8AsgTpgAmY7PhCfg==")
        binary = api.any_md5("abc", "01")
        self.assertEqual(len(binary), 128)
        self.assertEqual(int(binary, 2), int("900150983cd24fb0d6963f7d28e17f72", 16))

    def test_utf16_text_encoding(self) -> None:
        cfg = HashConfig(text_encoding="utf-16le")
        self.assertEqual(api.hex_md5("abc", cfg), hashlib.md5("abc".encode("utf-16-le")).hexdigest())
        cfg = HashConfig(text_encoding="utf-16be")
        self.assertEqual(api.hex_md5("abc", cfg), hashlib.md5("abc".encode("utf-16-be")).hexdigest())

    def test_idempotent(self) -> None:
        h = MD5Hasher(HashConfig(hex_uppercase=True, b64_pad="="))
        self.assertEqual(h.hex("repeat"), h.hex("repeat"))
        self.assertEqual(h.b64("repeat"), h.b64("repeat"))
        self.assertEqual(h.full_hash("p", "s", "c"), h.full_hash("p", "s", "c"))


class TestHMACOperations(unittest.TestCase):
    def test_hmac_hex(self) -> None:
        self.assertEqual(
            api.hex_hmac_md5("Jefe", "what do ya want for nothing?"),
            "750c783e6ab0b503eaa86e310a5db738",
        )
        self.assertEqual(api.hex_hmac_md5("\x0b" * 16, "Hi There"), "9294727a3638bb1c13f48ef8158bfc9d")

    def test_hmac_b64_and_any(self) -> None:
        raw = bytes.fromhex("750c783e6ab0b503eaa86e310a5db738")
        self.assertEqual(
            api.b64_hmac_md5("Jefe", "what do ya want for nothing?", HashConfig(b64_pad="=")),
            "dQx4PmqwtQPqqG4xCl23OA==",
        )
        self.assertEqual(
            api.any_hmac_md5("Jefe", "what do ya want for nothing?", "0123456789abcdef"),
            raw.hex(),
        )

    def test_salt_and_full_hash(self) -> None:
        for p, s, c in [("secret", "pepper", "nonce-1"), ("pässwörd", "s", "c" * 100)]:
            self.assertEqual(api.salt_hash(p, s), api.hex_hmac_md5(p, s))
            self.assertEqual(api.salt_hash(p, s), _ref_hmac_hex(p, s))
            self.assertEqual(api.full_hash(p, s, c), api.hex_hmac_md5(api.hex_hmac_md5(p, s), c))
            self.assertEqual(api.full_hash(p, s, c), _ref_hmac_hex(_ref_hmac_hex(p, s), c))

    def test_hash(self) -> None:
        self.assertEqual(api.hash_text("abc"), "900150983cd24fb0d6963f7d28e17f72")


class TestArgumentErrors(unittest.TestCase):
    def test_empty_arguments(self) -> None:
        cases = [
            (api.hash_text, ("",), "plaintext"),
            (api.salt_hash, ("", "s"), "plaintext"),
            (api.salt_hash, ("p", ""), "salt"),
            (api.full_hash, ("", "s", "c"), "plaintext"),
            (api.full_hash, ("p", "", "c"), "salt"),
            (api.full_hash, ("p", "s", ""), "challenge"),
            (api.hex_hmac_md5, ("", "d"), "key"),
            (api.b64_hmac_md5, ("k", ""), "data"),
            (api.any_hmac_md5, ("k", None, "01"), "data"),
        ]
        for fn, args, name in cases:
            with self.assertRaises(InvalidArgumentError) as cm:
                fn(*args)
            self.assertIs(cm.exception.kind, ErrorKind.INVALID_ARGUMENT)
            self.assertEqual(str(cm.exception), f"{name} required")

    def test_validation_happens_before_hashing(self) -> None:
        with mock.patch("md5digest.api.hmac_md5_bytes") as hm:
            with self.assertRaises(InvalidArgumentError):
                api.full_hash("p", "s", "")
            hm.assert_not_called()
        with mock.patch("md5digest.api.md5_bytes") as md:
            with self.assertRaises(InvalidConfigurationError):
                api.any_md5("abc", "")
            md.assert_not_called()

    def test_empty_alphabet(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            api.any_md5("abc", "")
        with self.assertRaises(InvalidConfigurationError):
            api.any_hmac_md5("k", "d", "")


class TestHashConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = HashConfig()
        self.assertFalse(cfg.hex_uppercase)
        self.assertEqual(cfg.b64_pad, "")
        self.assertEqual(cfg.text_encoding, "utf-8")

    def test_overrides_do_not_mutate(self) -> None:
        cfg = HashConfig()
        upper = cfg.with_overrides(hex_uppercase=True)
        self.assertTrue(upper.hex_uppercase)
        self.assertFalse(cfg.hex_uppercase)

    def test_invalid_values(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            HashConfig(b64_pad="+")
        with self.assertRaises(InvalidConfigurationError):
            HashConfig(text_encoding="latin-1")

    def test_from_env(self) -> None:
        env = {ENV_HEXCASE: "UPPER", ENV_B64PAD: "=", ENV_ENCODING: "utf-16be"}
        with mock.patch.dict("os.environ", env):
            cfg = HashConfig.from_env()
        self.assertEqual(cfg, HashConfig(hex_uppercase=True, b64_pad="=", text_encoding="utf-16be"))
        with mock.patch.dict("os.environ", {ENV_HEXCASE: "mixed"}):
            with self.assertRaises(InvalidConfigurationError):
                HashConfig.from_env()


if __name__ == "__main__":
    unittest.main()
