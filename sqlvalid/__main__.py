from sqlvalid.cli.main import main

raise SystemExit(main())
