#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import os


# Local
from .common import NODE_COUNT
from .common import NODE_VALUE_MAX
from .common import NODE_VALUE_MIN
from .common import S16_MAX
from .common import S16_MIN


# External
import yaml


VALUE_RANGES = {
    "int16":    (S16_MIN, S16_MAX),
    "node":     (NODE_VALUE_MIN, NODE_VALUE_MAX)
}


class Config:
    def __init__(self, maxNodes=NODE_COUNT, valueRange="int16", requireFinalTerminator=False):
        assert 1 <= maxNodes <= NODE_COUNT
        assert valueRange in VALUE_RANGES

        self.maxNodes = maxNodes
        self.valueRange = valueRange
        self.requireFinalTerminator = requireFinalTerminator

    @property
    def maxSection(self):
        return self.maxNodes - 1

    @property
    def valueMin(self):
        return VALUE_RANGES[self.valueRange][0]

    @property
    def valueMax(self):
        return VALUE_RANGES[self.valueRange][1]

    def __repr__(self):
        return "Config(maxNodes=%d, valueRange=%r, requireFinalTerminator=%r)" % (self.maxNodes, self.valueRange, self.requireFinalTerminator)

    @staticmethod
    def fromObj(obj, error=print):
        if obj is None:
            return Config()

        if not isinstance(obj, dict):
            error("Expected config to be a key-value mapping")
            return None

        ### Selected Options Sanity Check ###

        available_options = (
            "MaxNodes",
            "ValueRange",
            "RequireFinalTerminator"
        )

        for k in obj:
            if k not in available_options:
                error("Unrecognized option: %r" % k)
                return None

        config = Config()

        ### Node Count Reading ###

        if "MaxNodes" in obj:
            max_nodes = obj["MaxNodes"]
            # bool is an int subclass
            if not isinstance(max_nodes, int) or isinstance(max_nodes, bool) or not (1 <= max_nodes <= NODE_COUNT):
                error("Expected \"MaxNodes\" to be an integer in range [1, %d], received: %r" % (NODE_COUNT, max_nodes))
                return None

            config.maxNodes = max_nodes

        ### Value Range Reading ###

        if "ValueRange" in obj:
            value_range = obj["ValueRange"]
            if not isinstance(value_range, str) or value_range not in VALUE_RANGES:
                error("Expected \"ValueRange\" to be one of %s, received: %r" % (", ".join(map(repr, VALUE_RANGES)), value_range))
                return None

            config.valueRange = value_range

        ### Final Terminator Determiner Reading ###

        if "RequireFinalTerminator" in obj:
            require = obj["RequireFinalTerminator"]
            if not isinstance(require, bool):
                error("Expected \"RequireFinalTerminator\" to be a boolean")
                return None

            config.requireFinalTerminator = require

        return config

    @staticmethod
    def fromYaml(file_path, error=print):
        if not os.path.isfile(file_path):
            error("File does not exist: %r" % file_path)
            return None

        with open(file_path, encoding="utf8") as inf:
            try:
                obj = yaml.safe_load(inf)
            except yaml.YAMLError as e:
                error("Unable to read YAML file %r:\n%s" % (file_path, e))
                return None

        return Config.fromObj(obj, error)
