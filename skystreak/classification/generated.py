"""
This module turns a trained tree into a standalone Python module, and loads such modules back.

:func:`generate_decision_tree_struct` hashes the training parameters, renders the tree with
:func:`render_classifier_module`, and wraps everything in a :class:`DecisionTreeStruct` which can :meth:`write
<DecisionTreeStruct.write>` the module to disk.  A written module defines a :class:`GeneratedDecisionTree` subclass named
after the first characters of the hash, exported as ``CLASSIFIER``, which :func:`load_classifier_module` instantiates.
"""

import hashlib
import importlib.util
import logging
import textwrap
import time

from abc import abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from skystreak.features.feature import Feature
from skystreak.features.feature_data import OutlierGroupFeatureData
from skystreak.classification.classifier import (DecisionTree, PythonDecisionTree, PythonDecisionSubtree,
                                                 TreeClassifierType, ClassifierType, lookup_value)
from skystreak.classification.params import DecisionTreeParams, DecisionSplitType
from skystreak.classification.tree_nodes import INDENT, python_literal
from skystreak._typing import DecisionValueSource, PATH


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


SHA_PREFIX_SIZE: int = 8
"""
How many characters of the hash name a generated tree
"""

DEFAULT_BASE_FILENAME: str = "outlier_group_decision_tree_"
"""
What the file names of generated modules start with
"""


def decision_tree_sha256(params: DecisionTreeParams) -> str:
    """
    The hex digest identifying a tree by the parameters it was trained with.

    The training set sizes, input sequences, decision types, split types and max depth (``-1`` for unlimited) are
    hashed in that order.
    """

    digest = hashlib.sha256()

    digest.update(str(params.positive_training_size).encode('utf-8'))
    digest.update(str(params.negative_training_size).encode('utf-8'))

    for sequence in params.input_sequences:
        digest.update(sequence.encode('utf-8'))

    for feature in params.decision_types:
        digest.update(feature.value.encode('utf-8'))

    for split_type in params.decision_split_types:
        digest.update(split_type.value.encode('utf-8'))

    digest.update(str(-1 if params.max_depth is None else params.max_depth).encode('utf-8'))

    return digest.hexdigest()


def collect_subtree_code(subtrees: Sequence[PythonDecisionSubtree]) -> list[str]:
    """
    Render every subtree along with the subtrees they call in turn.
    """

    rendered = []
    pending = list(subtrees)
    while pending:
        code, further = pending.pop(0).python_code
        rendered.append(code)
        pending.extend(further)

    return rendered


def _tuple_source(items: Sequence[str]) -> str:
    if not items:
        return "()"
    body = "".join(f"\n{INDENT * 2}{item}," for item in items)
    return f"({body}\n{INDENT})"


def render_classifier_module(tree: PythonDecisionTree, params: DecisionTreeParams, sha256: str,
                             generation_seconds_since_1970: float) -> str:
    """
    Render a complete Python module classifying outlier groups the same way `tree` does.

    :param tree: the root of the trained tree
    :param params: the parameters the tree was trained with
    :param sha256: the digest identifying the tree
    :param generation_seconds_since_1970: when the tree was generated
    :return: the source of the module
    """

    prefix = sha256[:SHA_PREFIX_SIZE]

    body, subtrees = tree.python_code
    subtree_code = "\n\n".join(collect_subtree_code(subtrees))

    generation_date = datetime.fromtimestamp(generation_seconds_since_1970, tz=timezone.utc).isoformat()

    input_list = "".join(f"    - {sequence}\n" for sequence in params.input_sequences)

    not_used = [feature for feature in Feature if feature not in params.decision_types]

    lines = [
        '"""',
        f'Auto generated by skystreak on {generation_date}.',
        '',
        'Trained on:',
        f'    - {params.positive_training_size} groups known to be positive',
        f'    - {params.negative_training_size} groups known to be negative',
        '',
        'From input sequences:',
        input_list + '"""',
        '',
        '# DO NOT EDIT THIS FILE',
        '',
        'from skystreak.classification.generated import GeneratedDecisionTree',
        'from skystreak.classification.params import DecisionSplitType',
        'from skystreak.features.feature import Feature',
        '',
        '',
        'def classify(group):',
        textwrap.indent(body, INDENT),
        '',
        '',
    ]

    if subtree_code:
        lines += [subtree_code, '']

    lines += [
        f'class OutlierGroupDecisionTree_{prefix}(GeneratedDecisionTree):',
        f'{INDENT}sha256 = {sha256!r}',
        f'{INDENT}name = {prefix!r}',
        f'{INDENT}generation_seconds_since_1970 = {python_literal(generation_seconds_since_1970)}',
        f'{INDENT}input_sequences = {_tuple_source([repr(sequence) for sequence in params.input_sequences])}',
        f'{INDENT}positive_training_size = {params.positive_training_size}',
        f'{INDENT}negative_training_size = {params.negative_training_size}',
        f'{INDENT}max_depth = {params.max_depth!r}',
        f'{INDENT}pruned = {params.pruned!r}',
        f'{INDENT}decision_types = {_tuple_source([f"Feature.{f.name}" for f in params.decision_types])}',
        f'{INDENT}not_used_decision_types = {_tuple_source([f"Feature.{f.name}" for f in not_used])}',
        f'{INDENT}decision_split_types = '
        f'{_tuple_source([f"DecisionSplitType.{s.name}" for s in params.decision_split_types])}',
        '',
        f'{INDENT}def _classify(self, group):',
        f'{INDENT * 2}return classify(group)',
        '',
        '',
        f'CLASSIFIER = OutlierGroupDecisionTree_{prefix}',
        '',
    ]

    return "\n".join(lines)


class GeneratedDecisionTree(DecisionTree):
    """
    The base of the classes defined by generated modules.

    Subclasses set the provenance as class attributes and implement :meth:`_classify`.
    """

    input_sequences: tuple[str, ...] = ()
    positive_training_size: int = 0
    negative_training_size: int = 0
    max_depth: int | None = None
    pruned: bool = False
    decision_types: tuple[Feature, ...] = ()
    not_used_decision_types: tuple[Feature, ...] = ()
    decision_split_types: tuple[DecisionSplitType, ...] = ()

    @abstractmethod
    def _classify(self, group: DecisionValueSource) -> float:
        """
        Score a group with the generated tree
        """
        pass

    @property
    def type(self) -> ClassifierType:
        return TreeClassifierType(DecisionTreeParams(name=self.name,
                                                     input_sequences=tuple(self.input_sequences),
                                                     positive_training_size=self.positive_training_size,
                                                     negative_training_size=self.negative_training_size,
                                                     decision_types=tuple(self.decision_types),
                                                     decision_split_types=tuple(self.decision_split_types),
                                                     max_depth=self.max_depth,
                                                     pruned=self.pruned))

    def classification(self, group: DecisionValueSource) -> float:
        return float(self._classify(group))

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        """
        Score parallel lists of features and values.

        :raises ValueError: if any of the :attr:`decision_types` is missing from `features`
        """

        for feature in self.decision_types:
            lookup_value(feature, features, values)

        return self.classification(OutlierGroupFeatureData(features, values))


class DecisionTreeStruct(DecisionTree):
    """
    A freshly trained tree together with its generated module and provenance.

    Classification is delegated to :attr:`tree`.
    """

    def __init__(self, name: str, python_code: str, tree: PythonDecisionTree, filename: str, sha256: str,
                 generation_seconds_since_1970: float, input_sequences: Sequence[str],
                 decision_types: Sequence[Feature], type: ClassifierType) -> None:
        """
        :param name: the name of the tree, the hash prefix for generated trees
        :param python_code: the source of the generated module
        :param tree: the root node of the tree
        :param filename: where the module should be written
        :param sha256: the digest identifying the tree
        :param generation_seconds_since_1970: when the tree was generated
        :param input_sequences: the image sequences the training data came from
        :param decision_types: the features the tree could split on
        :param type: the parameters the tree was trained with
        """

        self._name: str = name
        self.python_code: str = python_code
        self.tree: PythonDecisionTree = tree
        self.filename: str = filename
        self._sha256: str = sha256
        self._generation_seconds_since_1970: float = generation_seconds_since_1970
        self.input_sequences: tuple[str, ...] = tuple(input_sequences)
        self.decision_types: tuple[Feature, ...] = tuple(decision_types)
        self._type: ClassifierType = type

    @property
    def name(self) -> str:
        return self._name

    @property
    def sha256(self) -> str:
        return self._sha256

    @property
    def generation_seconds_since_1970(self) -> float:
        return self._generation_seconds_since_1970

    @property
    def type(self) -> ClassifierType:
        return self._type

    def classification(self, group: DecisionValueSource) -> float:
        return self.tree.classification(group)

    def classification_of(self, features: Sequence[Feature], values: Sequence[float]) -> float:
        return self.tree.classification_of(features, values)

    def write(self, directory: PATH) -> Path:
        """
        Write the generated module into `directory`.

        :return: the path written
        :raises FileExistsError: if a module for this tree already exists there
        """

        path = Path(directory) / self.filename

        if path.exists():
            raise FileExistsError(f'decision tree already exists at {path}')

        with path.open('w') as out_file:
            out_file.write(self.python_code)

        _LOGGER.info(f'wrote decision tree {self.name} to {path}')

        return path


def generate_decision_tree_struct(tree: PythonDecisionTree, params: DecisionTreeParams,
                                  base_filename: str = DEFAULT_BASE_FILENAME,
                                  generation_seconds_since_1970: float | None = None) -> DecisionTreeStruct:
    """
    Hash, name, and render a trained tree.

    :param tree: the root of the trained tree
    :param params: the parameters the tree was trained with
    :param base_filename: the start of the module file name, which is completed with the hash prefix
    :param generation_seconds_since_1970: when the tree was generated, now if ``None``
    :return: the tree with its generated module and provenance
    """

    if generation_seconds_since_1970 is None:
        generation_seconds_since_1970 = time.time()

    sha256 = decision_tree_sha256(params)
    prefix = sha256[:SHA_PREFIX_SIZE]

    python_code = render_classifier_module(tree, params, sha256, generation_seconds_since_1970)

    return DecisionTreeStruct(name=prefix,
                              python_code=python_code,
                              tree=tree,
                              filename=f"{base_filename}{prefix}.py",
                              sha256=sha256,
                              generation_seconds_since_1970=generation_seconds_since_1970,
                              input_sequences=params.input_sequences,
                              decision_types=params.decision_types,
                              type=TreeClassifierType(params))


def load_classifier_module(filename: PATH) -> GeneratedDecisionTree:
    """
    Import a generated module and instantiate the classifier it defines.

    :raises ImportError: if the file cannot be loaded as a module
    :raises AttributeError: if the module does not export ``CLASSIFIER``
    """

    path = Path(filename)

    spec = importlib.util.spec_from_file_location(f"skystreak_generated_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f'unable to load a classifier from {path}')

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    return module.CLASSIFIER()
