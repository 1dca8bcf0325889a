"""
Encrypt and decrypt a file with keys written by 01_keygen.py
"""
import sys

from sspy import KeyCodec, encrypt_file, decrypt_file


def main(path: str):
    with open("ss.pub") as f:
        public_key = KeyCodec.read_pub(f)
    with open("ss.priv") as f:
        private_key = KeyCodec.read_priv(f)

    with open(path, "rb") as src, open(path + ".enc", "wb") as dst:
        blocks = encrypt_file(src, dst, public_key.n)
    print(f"Encrypted {path} into {blocks} blocks for {public_key.owner}")

    with open(path + ".enc", "rb") as src, open(path + ".dec", "wb") as dst:
        decrypt_file(src, dst, private_key.d, private_key.pq)
    print(f"Decrypted back into {path}.dec")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else __file__)
