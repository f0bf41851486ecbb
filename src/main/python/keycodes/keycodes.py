# coding: utf-8

# SPDX-License-Identifier: GPL-2.0-or-later

import logging
import sys

from keycodes.custom_keycodes import CustomKeycode
from util import tr

USER_KEYCODE_COUNT = 64

# USER00 in each keycode format; v6 is used from VIA protocol 12 onwards
USER_KEYCODE_BASE = {
    5: 0x5F80,
    6: 0x7E40,
}


class Keycode:

    protocol = 6
    hidden = False

    def __init__(self, qmk_id, label, tooltip=None, alias=None):
        self.qmk_id = qmk_id
        self.label = label
        # Qt WASM can't render CJK - fall back to the keycode name
        if sys.platform == "emscripten" and not label.isascii():
            self.label = qmk_id
        self.tooltip = tooltip

        self.alias = [self.qmk_id]
        if alias:
            self.alias += alias

    @classmethod
    def find(cls, qmk_id):
        return KEYCODES_MAP.get(qmk_id)

    @classmethod
    def label(cls, qmk_id):
        keycode = cls.find(qmk_id)
        if keycode is None:
            return qmk_id
        return keycode.label

    @classmethod
    def tooltip(cls, qmk_id):
        keycode = cls.find(qmk_id)
        if keycode is None:
            return None
        tooltip = keycode.qmk_id
        if keycode.tooltip:
            tooltip = "{}: {}".format(tooltip, keycode.tooltip)
        return tooltip

    @classmethod
    def serialize(cls, code):
        """ Converts integer keycode to string """
        kc = RAWCODES_MAP.get(code)
        if kc is not None:
            return kc.qmk_id
        return hex(code)

    @classmethod
    def deserialize(cls, val, reraise=False):
        """ Converts string keycode to integer """
        if isinstance(val, int):
            return val
        keycode = cls.find(val)
        if keycode is not None:
            val = keycode.qmk_id
        try:
            return cls.resolve(val)
        except RuntimeError:
            if reraise:
                raise
        return 0

    @classmethod
    def resolve(cls, qmk_constant):
        """ Translates a USERxx constant into the firmware-specific integer keycode """
        base = USER_KEYCODE_BASE.get(cls.protocol)
        if base is None:
            raise RuntimeError("unsupported keycode protocol {}".format(cls.protocol))
        if qmk_constant.startswith("USER") and qmk_constant[4:].isdigit():
            idx = int(qmk_constant[4:])
            if idx < USER_KEYCODE_COUNT:
                return base + idx
        raise RuntimeError("unable to resolve qmk_id={}".format(qmk_constant))


KEYCODES_USER = []

KEYCODES = []
KEYCODES_MAP = dict()
RAWCODES_MAP = dict()


def recreate_keycodes():
    """ Regenerates global KEYCODES array """

    KEYCODES.clear()
    KEYCODES.extend(KEYCODES_USER)
    KEYCODES_MAP.clear()
    RAWCODES_MAP.clear()
    for keycode in KEYCODES:
        for alias in keycode.alias:
            KEYCODES_MAP[alias] = keycode
        RAWCODES_MAP[Keycode.deserialize(keycode.qmk_id)] = keycode


def _placeholder(x):
    kc = Keycode(
        "USER{:02}".format(x),
        "USER{:02}".format(x),
        tr("Keycode", "User keycode {}").format(x)
    )
    kc.hidden = True
    return kc


def create_user_keycodes():
    """Create hidden USER keycodes for decoding purposes when no custom keycodes are defined."""
    KEYCODES_USER.clear()
    for x in range(USER_KEYCODE_COUNT):
        KEYCODES_USER.append(_placeholder(x))


def create_custom_user_keycodes(custom_keycodes):
    """Assign custom keycodes to USER slots in order.

    Entries are either CustomKeycode objects or customKeycodes dicts as found in a
    keyboard definition. The custom code becomes an alias of its USER slot.
    """
    if len(custom_keycodes) > USER_KEYCODE_COUNT:
        raise RuntimeError("Misconfigured: {} custom keycodes but only {} USER slots".format(
            len(custom_keycodes), USER_KEYCODE_COUNT))

    KEYCODES_USER.clear()
    claimed = set()
    for x, c_keycode in enumerate(custom_keycodes):
        if isinstance(c_keycode, CustomKeycode):
            c_keycode = c_keycode.as_json()
        default_name = "USER{:02}".format(x)
        short_name = c_keycode.get("shortName") or default_name
        code = c_keycode.get("code") or c_keycode.get("name") or default_name
        if code in claimed:
            raise RuntimeError("Misconfigured: two custom keycodes claim the same code {}".format(code))
        claimed.add(code)

        alias = [code] if code != default_name else None
        kc = Keycode(
            default_name,
            short_name,
            c_keycode.get("title") or default_name,
            alias=alias
        )
        # Hide keycodes that don't have a meaningful custom name
        if short_name == default_name:
            kc.hidden = True
        KEYCODES_USER.append(kc)

    # Create hidden keycodes for remaining slots (for decoding, not shown in UI)
    for x in range(len(custom_keycodes), USER_KEYCODE_COUNT):
        KEYCODES_USER.append(_placeholder(x))
    logging.debug("create_custom_user_keycodes: %d custom keycodes assigned", len(custom_keycodes))


def recreate_keyboard_keycodes(keyboard):
    """ Generates USER keycodes based on information the keyboard provides """

    Keycode.protocol = 6 if keyboard.via_protocol >= 12 else 5

    # Check if custom keycodes are defined in keyboard, and if so add them to user keycodes
    if keyboard.custom_keycodes is not None and len(keyboard.custom_keycodes) > 0:
        create_custom_user_keycodes(keyboard.custom_keycodes)
    else:
        create_user_keycodes()

    recreate_keycodes()


create_user_keycodes()
recreate_keycodes()
