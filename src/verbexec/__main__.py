from verbexec.cli import main

raise SystemExit(main())
