"""Multi-key XOR data encryption engine with a rotating key schedule."""

from __future__ import annotations

from collections.abc import Iterable

MAX_KEYS = 4


def _check_byte(value: int, what: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{what} must be an integer in 0..255, got {value!r}")
    return value


class DEA:
    """Encrypts bytes by XOR with up to four keys used in rotation.

    ``key_counter`` selects the key applied to the next byte and advances
    after every byte, wrapping at the number of loaded keys.
    """

    def __init__(self) -> None:
        self._slots = [0] * MAX_KEYS
        self.num_keys = 0
        self.key_counter = 0
        self.dout = 0

    @property
    def keys(self) -> tuple[int, ...]:
        """The keys currently in use, in rotation order."""
        return tuple(self._slots[: self.num_keys])

    def reset(self) -> None:
        """Rewind the key rotation and clear the output; loaded keys are kept."""
        self.key_counter = 0
        self.dout = 0

    def set_key(self, key: int) -> None:
        """Load a key into the next free slot.

        Once four keys are loaded, the next key replaces the first slot and
        the engine continues with that single key.
        """
        _check_byte(key, "key")
        if self.num_keys < MAX_KEYS:
            self._slots[self.num_keys] = key
            self.num_keys += 1
        else:
            self._slots[0] = key
            self.num_keys = 1

    def set_keys(self, keys: Iterable[int]) -> None:
        """Load several keys in order."""
        for key in keys:
            self.set_key(key)

    def encrypt_byte(self, data_in: int) -> int:
        """Encrypt one byte with the active key and advance the rotation."""
        _check_byte(data_in, "data byte")
        if self.num_keys == 0:
            return data_in
        self.dout = data_in ^ self._slots[self.key_counter]
        self.key_counter = (self.key_counter + 1) % self.num_keys
        return self.dout

    def encrypt_block(self, data: bytes | bytearray | memoryview) -> bytes:
        """Encrypt a block of bytes, continuing the current key rotation."""
        data = bytes(data)
        if not data or self.num_keys == 0:
            return data

        head = b""
        if self.key_counter >= self.num_keys:
            # A counter left beyond the loaded keys still selects its slot once.
            head = bytes([self.encrypt_byte(data[0])])
            data = data[1:]
            if not data:
                return head

        count = self.num_keys
        start = self.key_counter
        active = bytes(self._slots[:count])
        stream = active[start:] + active[:start]
        size = len(data)
        keystream = (stream * (size // count + 1))[:size]
        mixed = int.from_bytes(data, "big") ^ int.from_bytes(keystream, "big")
        result = mixed.to_bytes(size, "big")

        self.key_counter = (start + size) % count
        self.dout = result[-1]
        return head + result

    def decrypt_block(self, data: bytes | bytearray | memoryview) -> bytes:
        """Decrypt a block that was encrypted from the start of the rotation.

        The rotation is rewound before decrypting and is left where the
        block ends.
        """
        self.key_counter = 0
        return self.encrypt_block(data)