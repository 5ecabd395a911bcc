from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TokenStream:
    words: Tuple[str, ...]   # tokens con el case original (valores)
    lower: Tuple[str, ...]   # mismos tokens en minúsculas (keywords)

    def __len__(self) -> int:
        return len(self.words)


def split_by_space(text: str) -> Tuple[str, ...]:
    # Solo el espacio ASCII separa; tabs y saltos de línea quedan dentro del token
    return tuple(w for w in text.split(" ") if w)


def tokenize(instruction: str) -> TokenStream:
    words = split_by_space(instruction)
    return TokenStream(words=words, lower=tuple(w.lower() for w in words))


class Cursor:
    """
    Lectura posicional sobre un TokenStream. Leer más allá del final
    devuelve None; cada etapa decide qué código de error le corresponde.
    """

    def __init__(self, stream: TokenStream):
        self.stream = stream
        self.pos = 0

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.stream)

    def peek_lower(self) -> Optional[str]:
        if self.exhausted:
            return None
        return self.stream.lower[self.pos]

    def take(self) -> Optional[str]:
        if self.exhausted:
            return None
        word = self.stream.words[self.pos]
        self.pos += 1
        return word

    def take_lower(self) -> Optional[str]:
        word = self.take()
        return None if word is None else word.lower()
