"""
This module provides a lookup table of named classifiers.
"""

import logging

from pathlib import Path
from typing import Iterator

from skystreak.classification.classifier import NamedOutlierGroupClassifier
from skystreak.classification.generated import load_classifier_module, DEFAULT_BASE_FILENAME
from skystreak._typing import PATH


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class ClassifierRegistry:
    """
    Named classifiers keyed by name, which for generated trees is the start of their hash.

    Lookups accept any unambiguous prefix of a key.
    """

    def __init__(self) -> None:
        self._classifiers: dict[str, NamedOutlierGroupClassifier] = {}

    def register(self, classifier: NamedOutlierGroupClassifier, key: str | None = None) -> bool:
        """
        Add a classifier.

        :param classifier: the classifier to add
        :param key: the key to add it under, its name if ``None``
        :return: ``False`` without changing anything if the key is already taken
        """

        if key is None:
            key = classifier.name

        if key in self._classifiers:
            _LOGGER.error(f'a classifier is already registered as {key}')
            return False

        self._classifiers[key] = classifier
        _LOGGER.debug(f'registered classifier {key}')
        return True

    def get(self, key: str) -> NamedOutlierGroupClassifier:
        """
        Look up a classifier by its key or a unique prefix of it.

        :raises KeyError: if nothing matches
        :raises ValueError: if the prefix matches more than one key
        """

        classifier = self._classifiers.get(key)
        if classifier is not None:
            return classifier

        matches = [candidate for candidate in self._classifiers if candidate.startswith(key)]

        if not matches:
            raise KeyError(key)

        if len(matches) > 1:
            raise ValueError(f'{key} matches more than one classifier: {", ".join(sorted(matches))}')

        return self._classifiers[matches[0]]

    def load_directory(self, directory: PATH, base_filename: str = DEFAULT_BASE_FILENAME) -> int:
        """
        Load and register every generated classifier module in `directory`.

        :return: how many classifiers were registered
        """

        loaded = 0
        for filename in sorted(Path(directory).glob(f"{base_filename}*.py")):
            if self.register(load_classifier_module(filename)):
                loaded += 1

        _LOGGER.info(f'loaded {loaded} classifiers from {directory}')

        return loaded

    @property
    def names(self) -> list[str]:
        """
        The registered keys in registration order
        """
        return list(self._classifiers)

    def __contains__(self, key: object) -> bool:
        return key in self._classifiers

    def __len__(self) -> int:
        return len(self._classifiers)

    def __iter__(self) -> Iterator[NamedOutlierGroupClassifier]:
        return iter(self._classifiers.values())
