# foodquick/io/loader.py
"""Driver roster loading"""
from dataclasses import dataclass, field
from typing import Callable, List, Tuple
from foodquick.config import FILE_ENCODING, ROSTER_DELIMITER, ROSTER_FIELD_COUNT
from foodquick.errors import RosterError, RosterFileMissing, RosterLineError
from foodquick.models import DriverRecord


@dataclass
class RosterLoadResult:
    """Drivers read from the roster, in file order, plus any reported problems"""
    drivers: Tuple[DriverRecord, ...] = ()
    errors: List[str] = field(default_factory=list)
    
    @property
    def ok(self) -> bool:
        return not self.errors


class RosterLoader:
    """Handles loading of the driver roster file"""
    
    @staticmethod
    def parse_line(line: str, line_number: int) -> DriverRecord:
        """Parse one name,city,load line into a DriverRecord"""
        parts = [part.strip() for part in line.split(ROSTER_DELIMITER)]
        if len(parts) != ROSTER_FIELD_COUNT:
            raise RosterLineError(
                line_number, line,
                f"expected {ROSTER_FIELD_COUNT} fields, found {len(parts)}"
            )
        
        name, city, load_text = parts
        if not name or not city:
            raise RosterLineError(line_number, line, "driver name and city are required")
        
        try:
            load = int(load_text)
        except ValueError:
            raise RosterLineError(line_number, line, f"load '{load_text}' is not a whole number")
        if load < 0:
            raise RosterLineError(line_number, line, f"load {load} is negative")
        
        return DriverRecord(name=name, city=city, load=load)
    
    @staticmethod
    def read_lines(filepath: str) -> List[str]:
        """Read the raw roster lines"""
        try:
            with open(filepath, 'r', encoding=FILE_ENCODING) as f:
                return f.read().splitlines()
        except FileNotFoundError:
            raise RosterFileMissing(filepath)
        except (OSError, UnicodeDecodeError) as e:
            raise RosterFileMissing(filepath, reason=f"Could not read roster ({e})")
    
    @staticmethod
    def load_drivers(filepath: str, echo: Callable[[str], None] = print) -> RosterLoadResult:
        """Load drivers from a roster file.
        
        Problems never abort the run: a missing file gives an empty roster,
        a malformed line is skipped. Both are reported in the result.
        """
        result = RosterLoadResult()
        
        try:
            lines = RosterLoader.read_lines(filepath)
        except RosterError as e:
            result.errors.append(str(e))
            echo(f"⚠️  {e}")
            return result
        
        drivers = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                drivers.append(RosterLoader.parse_line(line, line_number))
            except RosterLineError as e:
                result.errors.append(str(e))
                echo(f"⚠️  Skipping malformed roster line. {e}")
        
        result.drivers = tuple(drivers)
        echo(f"Loaded {len(result.drivers)} drivers from {filepath}")
        
        return result
