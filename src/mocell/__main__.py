from mocell.cli import main

raise SystemExit(main())
