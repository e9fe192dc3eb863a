from typing import Protocol, Any, Mapping


class DumpWriter(Protocol):
    """
    Writes the fields of a decoded CPI Helper payload somewhere a local
    script runner can pick them up.
    """

    def write(self, payload: Mapping[str, Any]) -> dict[str, str]:
        """
        Persist the payload and return a mapping of logical file kind
        (body, header, properties) to the location written.
        """
