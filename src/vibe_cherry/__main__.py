"""Package entrypoint.

`python -m vibe_cherry` launches the local generation host.
"""

from vibe_cherry.host.main import main


if __name__ == "__main__":
    main()
