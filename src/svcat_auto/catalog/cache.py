"""Session-scoped cache of service catalog instances.

The cache is filled from ``svcat get instances`` the first time it is
queried and is then authoritative for the rest of the session.
"""

import threading
from collections.abc import Iterator

from icecream import ic

from svcat_auto import console
from svcat_auto.catalog.parsing import parse_instance_table
from svcat_auto.core.tools import Svcat
from svcat_auto.exceptions import CommandExecutionError
from svcat_auto.models import ServiceInstance


class ServiceInstanceCache:
    """Known service instances, by name and in listing order.

    The ordered names, the name mapping and the ordered instances always
    describe the same set. Population happens at most once at a time.

    Attributes:
        svcat: The svcat wrapper used to list instances.

    """

    def __init__(self, svcat: Svcat) -> None:
        self.svcat: Svcat = svcat
        self._names: list[str] = []
        self._by_name: dict[str, ServiceInstance] = {}
        self._instances: list[ServiceInstance] = []
        self._populate_lock = threading.Lock()

    @property
    def names(self) -> list[str]:
        """Instance names in listing order."""
        return list(self._names)

    @property
    def instances(self) -> list[ServiceInstance]:
        """Instances in listing order."""
        return list(self._instances)

    def get(self, name: str) -> ServiceInstance | None:
        """Look up an instance by name."""
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._instances)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ServiceInstance]:
        return iter(self.instances)

    def get_service_instances(self) -> list[ServiceInstance] | None:
        """Return the cached instances, listing them from the cluster if needed.

        Returns:
            The instances, or None if listing failed. Failures are reported
            to the operator and leave the cache empty so a later call retries.

        """
        if self._instances:
            return list(self._instances)

        with self._populate_lock:
            # Another caller may have populated while we waited
            if self._instances:
                return self.instances

            try:
                with console.spinner("Retrieving Service Instances..."):
                    results = self.svcat.get_instances()
            except CommandExecutionError as e:
                ic(e)
                console.error("Error retrieving Service Instances")
                return None

            if not results.succeeded:
                ic(results.stderr)
                console.error("Error retrieving Service Instances")
                return None

            self._populate(parse_instance_table(results.stdout))
            return self.instances

    def _populate(self, batch: list[ServiceInstance]) -> None:
        """Insert a fully parsed batch into every view.

        The views are built aside and swapped in together, so readers see
        either no instances or the whole batch.

        Args:
            batch: Parsed instances in listing order.

        """
        names: list[str] = []
        by_name: dict[str, ServiceInstance] = {}
        instances: list[ServiceInstance] = []
        for instance in batch:
            if instance.name is None or instance.name in by_name:
                ic("skipping duplicate or unnamed instance", instance)
                continue
            by_name[instance.name] = instance
            names.append(instance.name)
            instances.append(instance)

        # _instances gates the lock-free read path, so it is assigned last
        self._names = names
        self._by_name = by_name
        self._instances = instances

    def __repr__(self) -> str:
        return f"ServiceInstanceCache(instances={len(self)})"
