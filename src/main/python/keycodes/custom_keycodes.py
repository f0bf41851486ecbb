# coding: utf-8

# SPDX-License-Identifier: GPL-2.0-or-later
"""
Custom keycodes shared by the keyboards built on the common firmware library.

The list ends up under "customKeycodes" in the keyboard definition, one entry
per USER keycode slot, in firmware enum order.
"""
import logging
import re
from collections import namedtuple


class CustomKeycode(namedtuple("CustomKeycode", ["code", "name", "title", "short_name"])):

    __slots__ = ()

    def __new__(cls, code, name, title, short_name=None):
        # most keycodes render the same in both places
        if short_name is None:
            short_name = name
        return super().__new__(cls, code, name, title, short_name)

    def as_json(self):
        """ Dict in the shape of a definition's customKeycodes entry """
        return {
            "code": self.code,
            "name": self.name,
            "title": self.title,
            "shortName": self.short_name,
        }


C = CustomKeycode

CUSTOM_KEYCODES_BASE = (
    C("RHID_TOGG", "R.HID\nTOGG", "Toggle allow or deny access to RAW HID"),
    C("RHID_ON", "R.HID\nON", "Allow access to RAW HID"),
    C("RHID_OFF", "R.HID\nOFF", "Deny access to RAW HID"),
    C("MAC_TOGG", "Mac\nTOGG", "Toggle true apple mode with switching base layer 0(mac) or 1"),
    C("MAC_ON", "Mac\nON", "Enable true apple mode with switching base layer 0"),
    C("MAC_OFF", "Mac\nOFF", "Enable true apple mode with switching base layer 1"),
    C("USJ_TOGG", "USJ\nTOGG", "Toggle enabling key overridng for ANSI layout on JIS environment"),
    C("USJ_ON", "USJ\nON", "Enable key overriding for ANSI layout on JIS environment"),
    C("USJ_OFF", "USJ\nOFF", "Disable key overriding for ANSI layout on JIS environment"),
    C("APPLE_FN", "Apple\nfn", "Apple Fn/Globe Key"),
    C("APPLE_FF", "Apple\nfn+FK",
      "Apple Fn/Globe key for the keyboard that dosen't have F1-12 keys. F1-12 keys can be mapped on top row. "
      "When mac mode is off, It simulates mac fn functions."),
    C("EISU_KANA", "EISU\nKANA", "Toggle send かな and 英数"),
)

CUSTOM_KEYCODES_RADIAL_CONTROLLER = (
    C("RC_BTN", "RC\nBTN", "The button located on radial controller"),
    C("RC_CCW", "RC\nCCW", "Counter clockwise rotation of the radial controller", "RC\nLeft"),
    C("RC_CW", "RC\nCW", "Clockwise rotation of the radial controller", "RC\nRight"),
    C("RC_TUNE", "RC\nTUNE", "Dial rotation speed becomes slow"),
)

C = None


def build_custom_keycodes(options, defines=None):
    """Build the custom keycode list for a keyboard.

    options are the keyboard's rules.mk options, defines its config.h defines.
    defines is accepted for callers that pass both, but nothing depends on it yet.
    """
    if options is None:
        options = {}

    keycodes = list(CUSTOM_KEYCODES_BASE)
    # exact match, rules.mk only ever says "yes"
    if options.get("RADIAL_CONTROLLER_ENABLE") == "yes":
        logging.debug("build_custom_keycodes: radial controller enabled, adding %d keycodes",
                      len(CUSTOM_KEYCODES_RADIAL_CONTROLLER))
        keycodes.extend(CUSTOM_KEYCODES_RADIAL_CONTROLLER)
    return keycodes


def custom_keycodes_json(options, defines=None):
    return [kc.as_json() for kc in build_custom_keycodes(options, defines)]


RE_ASSIGNMENT = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*([:?+]?=)\s*(.*)$")


def parse_options(text):
    """ Parses rules.mk style NAME = value lines into a dict """
    options = dict()
    continued = False
    for lineno, raw in enumerate(text.splitlines(), start=1):
        raw = raw.rstrip()
        if continued:
            continued = raw.endswith("\\")
            continue
        # a comment ending in a backslash swallows the next line too
        continued = raw.endswith("\\")
        line, comment, _ = raw.partition("#")
        # multi-line values (SRC += a.c \) never hold a feature switch
        if continued and not comment:
            continue
        line = line.strip()
        if not line:
            continue
        m = RE_ASSIGNMENT.match(line)
        if m is None:
            logging.debug("parse_options: skipping line %d: %s", lineno, line)
            continue
        name, op, value = m.group(1), m.group(2), m.group(3).strip()
        if op == "+=" and options.get(name):
            value = "{} {}".format(options[name], value).strip()
        elif op == "?=" and name in options:
            continue
        options[name] = value
    return options


def load_options(path):
    with open(path, "r", encoding="utf-8") as f:
        return parse_options(f.read())
