"""Run the web app: ``python -m coding_specialist``."""

from coding_specialist.adapters.web.server import main

main()
