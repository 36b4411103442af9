"""Core perceptron framework: units, their trainer and networks of units."""

from .unit import Unit, WeightInit, InitMode, THRESHOLD
from .network import Network
from .activations import ACTIVATIONS, get_activation
from .training import (
    DeltaRuleTrainer,
    TrainingConfig,
    TrainingResult,
    TrainingStatus,
    search_learning_rate,
)
from .errors import (
    PerceptronError,
    DatasetError,
    EmptyDataError,
    LengthMismatchError,
    InputLengthError,
    TrainingError,
    ErrStabilizedError,
    ErrRisingError,
    OutOfIterationsError,
    OscillatingError,
    OutOfPrecisionError,
)

__all__ = [
    'Unit',
    'WeightInit',
    'InitMode',
    'THRESHOLD',
    'Network',
    'ACTIVATIONS',
    'get_activation',
    'DeltaRuleTrainer',
    'TrainingConfig',
    'TrainingResult',
    'TrainingStatus',
    'search_learning_rate',
    # Errors
    'PerceptronError',
    'DatasetError',
    'EmptyDataError',
    'LengthMismatchError',
    'InputLengthError',
    'TrainingError',
    'ErrStabilizedError',
    'ErrRisingError',
    'OutOfIterationsError',
    'OscillatingError',
    'OutOfPrecisionError',
]
