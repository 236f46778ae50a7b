"""Pod entity model consumed by the filter compilers.

This package provides the Pod/ContainerHandle protocols, the Lookup result
type their fallible accessors return, pod status derivation, and in-memory
snapshot models implementing the protocols.
"""

from podfilter.pods.contract import ContainerHandle, Pod
from podfilter.pods.lookup import Lookup
from podfilter.pods.snapshot import ContainerSnapshot, PodSnapshot
from podfilter.pods.status import derive_pod_status

__all__: list[str] = [
    "ContainerHandle",
    "Pod",
    "Lookup",
    "ContainerSnapshot",
    "PodSnapshot",
    "derive_pod_status",
]
