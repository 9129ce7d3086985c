import sys

from totp_client.cli import main

sys.exit(main())
