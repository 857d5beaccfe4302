from procstatus.cli.main import main

raise SystemExit(main())
