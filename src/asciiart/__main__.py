from asciiart.cli import main

raise SystemExit(main())
