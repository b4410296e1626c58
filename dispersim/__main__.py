from dispersim.cli import main

raise SystemExit(main())
