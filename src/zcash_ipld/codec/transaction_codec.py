"""
Transaction Codec

Encodes a Transaction into the exact byte layout Zcash hashes, and decodes
that layout back into models.

Layout::

    version            LE32
    len(inputs)        varint, then each TxIn
    len(outputs)       varint, then each TxOut
    lock_time          LE32
    -- only when version != 1 --
    len(join_splits)   varint, then each JSDescription
    js_pub_key         raw bytes, no length prefix
    js_sig             raw bytes, no length prefix
"""

from typing import List, Optional
import logging

from ..runtime.errors import MalformedInputError
from ..runtime.options import DEFAULT_DECODE_OPTIONS, JS_PUB_KEY_SIZE, JS_SIG_SIZE, DecodeOptions
from ..tx.models import LEGACY_VERSION, JSDescription, Transaction, TxIn, TxOut
from .reader import BinaryReader
from .writer import BinaryWriter

logger = logging.getLogger(__name__)


class TransactionCodec:
    """
    Wire codec for Zcash transactions (version 1 and version 2 layouts).
    """

    @staticmethod
    def write(tx: Transaction, writer: BinaryWriter) -> None:
        """
        Serialize ``tx`` into ``writer``.

        Args:
            tx: Transaction to encode
            writer: Byte sink
        """
        writer.u32le(tx.version)

        writer.varint(len(tx.inputs))
        for inp in tx.inputs:
            inp.write_to(writer)

        writer.varint(len(tx.outputs))
        for out in tx.outputs:
            out.write_to(writer)

        writer.u32le(tx.lock_time)
        if not tx.has_join_split_fields:
            return

        writer.varint(len(tx.join_splits))
        for js in tx.join_splits:
            js.write_to(writer)

        writer.bytes(tx.js_pub_key)
        writer.bytes(tx.js_sig)

    @staticmethod
    def encode(tx: Transaction) -> bytes:
        """
        Canonical bytes of ``tx``.

        Pure and deterministic; the result is both the wire form and the
        preimage of the transaction hash.
        """
        writer = BinaryWriter()
        TransactionCodec.write(tx, writer)
        return writer.to_bytes()

    @staticmethod
    def _read_count(reader: BinaryReader, what: str, options: DecodeOptions) -> int:
        n = reader.varint()
        if n > options.max_items:
            raise MalformedInputError(
                f"{what} count {n} exceeds limit {options.max_items}",
                details={"offset": reader.offset, "count": n},
            )
        return n

    @staticmethod
    def read(reader: BinaryReader, options: Optional[DecodeOptions] = None) -> Transaction:
        """
        Decode one transaction from ``reader``.

        Join-split public key and signature are present on the wire only
        when at least one join-split record is.

        Raises:
            MalformedInputError: If the bytes end before the transaction does
        """
        options = options or DEFAULT_DECODE_OPTIONS

        version = reader.u32le()

        n_in = TransactionCodec._read_count(reader, "input", options)
        inputs = tuple(TxIn.read_from(reader) for _ in range(n_in))

        n_out = TransactionCodec._read_count(reader, "output", options)
        outputs = tuple(TxOut.read_from(reader) for _ in range(n_out))

        lock_time = reader.u32le()
        if version == LEGACY_VERSION:
            return Transaction(
                version=version, inputs=inputs, outputs=outputs, lock_time=lock_time
            )

        n_js = TransactionCodec._read_count(reader, "join-split", options)
        join_splits: List[JSDescription] = [
            JSDescription.read_from(reader, options.joinsplit_proof_size) for _ in range(n_js)
        ]
        js_pub_key = b""
        js_sig = b""
        if n_js > 0:
            js_pub_key = reader.bytes(JS_PUB_KEY_SIZE)
            js_sig = reader.bytes(JS_SIG_SIZE)

        return Transaction(
            version=version,
            inputs=inputs,
            outputs=outputs,
            lock_time=lock_time,
            join_splits=tuple(join_splits),
            js_pub_key=js_pub_key,
            js_sig=js_sig,
        )

    @staticmethod
    def decode(raw: bytes, options: Optional[DecodeOptions] = None) -> Transaction:
        """
        Decode a complete serialized transaction.

        Args:
            raw: Serialized transaction
            options: Decoder options

        Returns:
            Decoded Transaction

        Raises:
            MalformedInputError: If the bytes are truncated, or carry trailing
                data and ``options.allow_trailing_bytes`` is off
        """
        options = options or DEFAULT_DECODE_OPTIONS
        reader = BinaryReader(raw)
        tx = TransactionCodec.read(reader, options)
        if not reader.eof:
            if not options.allow_trailing_bytes:
                raise MalformedInputError(
                    "extra junk at the end of transaction",
                    details={"offset": reader.offset, "trailing": reader.remaining},
                )
            logger.debug("Ignoring %d trailing bytes after transaction", reader.remaining)
        logger.debug(
            "Decoded zcash tx v%d: %d inputs, %d outputs, %d join-splits",
            tx.version, len(tx.inputs), len(tx.outputs), len(tx.join_splits),
        )
        return tx
