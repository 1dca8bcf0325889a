"""
Basic usage - Generate a key pair and write the key files
"""
from sspy import RandomState, KeyCodec, generate_keypair


def main():
    # Same seed, same keys
    rng = RandomState(42)
    keys = generate_keypair(256, 50, "alice", rng)

    with open("ss.pub", "w") as f:
        KeyCodec.write_pub(keys.public, f)
    with open("ss.priv", "w") as f:
        KeyCodec.write_priv(keys.private, f)

    print(f"n  ({keys.public.bits} bits) = {keys.public.n}")
    print(f"pq ({keys.private.bits} bits) = {keys.private.pq}")


if __name__ == "__main__":
    main()
