import sys

from wompi_client.cli import main


sys.exit(main())
