# foodquick/capture/reader.py
"""Console input handle shared by the capture stages"""
import sys
from typing import Optional, TextIO


class ConsoleReader:
    """Reads answers line by line from one input stream.
    
    Use it as a context manager. On exit the input stream is closed
    unless it is stdin; the output stream is never closed.
    """
    
    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.closed = False
    
    def __enter__(self) -> 'ConsoleReader':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    def say(self, message: str = '') -> None:
        """Print a line to the operator"""
        print(message, file=self.output)
    
    def ask(self, label: str) -> str:
        """Show a prompt and return the answer without its line ending.
        
        Raises EOFError when the input runs out.
        """
        if self.closed:
            raise ValueError("ConsoleReader is closed")
        self.output.write(f"{label}: ")
        self.output.flush()
        line = self.stream.readline()
        if not line:
            raise EOFError(f"Input ended while waiting for '{label}'")
        return line.rstrip('\r\n')
    
    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self.stream not in (sys.stdin, sys.__stdin__):
            self.stream.close()
