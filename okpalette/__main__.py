from okpalette.cli import main

raise SystemExit(main())
