import io
import zipfile
import zlib

from cpibridge.core.models.errors import DecodeError, DecodeStage
from cpibridge.core.models.payload import ArchiveEntry


class ArchiveCodec:
    """
    Builds and reads the single-entry ZIP archive carried by the ZIP variant.

    Every field that would otherwise depend on the host or the clock is
    pinned: the entry timestamp, the creator system and the file mode. Two
    archives built from the same entry are byte-identical.
    """
    CREATE_SYSTEM: int = 3  # unix
    FILE_MODE: int = 0o100644

    @classmethod
    def build(cls, entry: ArchiveEntry, level: int = 9) -> bytes:
        info = zipfile.ZipInfo(filename=entry.name, date_time=entry.date_time)
        info.compress_type = zipfile.ZIP_DEFLATED
        info.create_system = cls.CREATE_SYSTEM
        info.external_attr = cls.FILE_MODE << 16

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, mode="w") as archive:
            archive.writestr(info, entry.content, compresslevel=level)
        return buffer.getvalue()

    @classmethod
    def read_entry(cls, data: bytes, name: str = "data.json") -> bytes:
        """
        Return the content of entry `name`.

        Raises DecodeError(ARCHIVE) when `data` is not a readable ZIP archive
        or does not contain `name`.
        """
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                return archive.read(name)
        except KeyError as exc:
            raise DecodeError(DecodeStage.ARCHIVE, f"no entry named '{name}'") from exc
        except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
            raise DecodeError(DecodeStage.ARCHIVE, str(exc)) from exc
