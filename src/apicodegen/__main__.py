from apicodegen.cli import main

raise SystemExit(main())
