from brandaudit.cli import main

raise SystemExit(main())
