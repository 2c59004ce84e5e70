"""minimake - A minimal make: rebuild stale targets in dependency order."""

from .context import Context as Context
from .errors import BuildError as BuildError
from .errors import CommandFailure as CommandFailure
from .errors import DependencyCycle as DependencyCycle
from .errors import DuplicateEdge as DuplicateEdge
from .errors import MissingPrerequisite as MissingPrerequisite
from .errors import RuleSyntaxError as RuleSyntaxError
from .errors import UnknownTarget as UnknownTarget
from .errors import UnknownVertex as UnknownVertex
from .executor import CommandExecutor as CommandExecutor
from .executor import CommandResult as CommandResult
from .graph import DependencyGraph as DependencyGraph
from .store import VertexStore as VertexStore
from .traversal import BuildResult as BuildResult
from .traversal import BuildTraversal as BuildTraversal
from .traversal import Outcome as Outcome
from .vertex import Vertex as Vertex
