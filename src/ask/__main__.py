from ask.cli import main

raise SystemExit(main())
