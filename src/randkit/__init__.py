"""randkit — deterministic 64-bit pseudorandom number generators."""

__version__ = "0.1.0"

from randkit.config.schema import GeneratorConfig as GeneratorConfig
from randkit.config.schema import RunConfig as RunConfig
from randkit.core.base import CSPRNG as CSPRNG
from randkit.core.base import PRNG as PRNG
from randkit.core.base import WordSource as WordSource
from randkit.core.base import rotl64 as rotl64
from randkit.core.factory import build_generator as build_generator
from randkit.entropy.system import FixedEntropy as FixedEntropy
from randkit.entropy.system import SystemEntropy as SystemEntropy
from randkit.generators.isaac64 import Isaac64 as Isaac64
from randkit.generators.mersenne_twister import MersenneTwister64 as MersenneTwister64
from randkit.generators.registry import GENERATORS as GENERATORS
from randkit.generators.registry import get_generator_class as get_generator_class
from randkit.generators.splitmix64 import SplitMix64 as SplitMix64
from randkit.generators.splitmix64 import expand_seed as expand_seed
from randkit.generators.xoshiro256 import Xoshiro256StarStar as Xoshiro256StarStar
