from cards_core.cli import main

raise SystemExit(main())
